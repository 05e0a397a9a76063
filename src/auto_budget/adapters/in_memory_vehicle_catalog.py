from __future__ import annotations

from decimal import Decimal

from auto_budget.domain.vehicle import Trim, VehicleModel
from auto_budget.ports.vehicle_catalog import VehicleCatalog


def _model(name: str, category: str, trims: list[tuple[str, str]]) -> VehicleModel:
    trim_rows = tuple(Trim(name=trim_name, price=Decimal(price)) for trim_name, price in trims)
    return VehicleModel(
        name=name,
        base_price=trim_rows[0].price,
        category=category,
        trims=trim_rows,
    )


# Base price is the entry trim's MSRP (USD).
TOYOTA_LINEUP: tuple[VehicleModel, ...] = (
    _model("Corolla", "sedan", [("LE", "22325"), ("SE", "24995"), ("XSE", "28860")]),
    _model("Camry", "sedan", [("LE", "28400"), ("SE", "31200"), ("XLE", "34500"), ("XSE", "35000")]),
    _model("Prius", "hybrid", [("LE", "28350"), ("XLE", "31790"), ("Limited", "35365")]),
    _model(
        "RAV4",
        "suv",
        [("LE", "28850"), ("XLE", "30560"), ("XLE Premium", "34480"), ("Limited", "39740")],
    ),
    _model("Corolla Cross", "suv", [("L", "24135"), ("LE", "27740"), ("XLE", "29930")]),
    _model("Highlander", "suv", [("LE", "40220"), ("XLE", "43820"), ("Limited", "48620")]),
    _model("4Runner", "suv", [("SR5", "40770"), ("TRD Off-Road", "45200"), ("Limited", "54500")]),
    _model("Sienna", "minivan", [("LE", "39185"), ("XLE", "44985"), ("Limited", "51460")]),
    _model("Tacoma", "truck", [("SR", "31590"), ("SR5", "36000"), ("TRD Sport", "40400")]),
    _model("Tundra", "truck", [("SR", "40090"), ("SR5", "47450"), ("Limited", "55550")]),
)


class InMemoryVehicleCatalog(VehicleCatalog):
    """
    Canonical catalog implementation.

    - Keeps models in insertion order
    - Category match is case-insensitive
    - Price-range filtering applies to trims, then drops empty models
    """

    def __init__(self, models: list[VehicleModel] | tuple[VehicleModel, ...] = TOYOTA_LINEUP) -> None:
        self._models = {model.name: model for model in models}

    def list_models(self) -> list[VehicleModel]:
        return list(self._models.values())

    def get_model(self, name: str) -> VehicleModel | None:
        return self._models.get(name)

    def by_category(self, category: str) -> list[VehicleModel]:
        wanted = category.lower()
        return [model for model in self._models.values() if model.category.lower() == wanted]

    def in_price_range(
        self, price_min: Decimal | None, price_max: Decimal | None
    ) -> list[VehicleModel]:
        result = []
        for model in self._models.values():
            trims = tuple(trim for trim in model.trims if self._in_range(trim.price, price_min, price_max))
            if trims:
                result.append(
                    VehicleModel(
                        name=model.name,
                        base_price=model.base_price,
                        category=model.category,
                        trims=trims,
                    )
                )
        return result

    @staticmethod
    def _in_range(price: Decimal, price_min: Decimal | None, price_max: Decimal | None) -> bool:
        if price_min is not None and price < price_min:
            return False
        if price_max is not None and price > price_max:
            return False
        return True

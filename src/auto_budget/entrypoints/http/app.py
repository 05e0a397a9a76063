from fastapi import FastAPI

from auto_budget import config
from auto_budget.entrypoints.http.exception_handlers import register_exception_handlers
from auto_budget.entrypoints.http.routes.health import router as health_router
from auto_budget.entrypoints.http.routes.plans import router as plans_router
from auto_budget.entrypoints.http.routes.quotes import router as quotes_router
from auto_budget.entrypoints.http.routes.vehicles import router as vehicles_router
from auto_budget.logging_config import configure_logging


def build_app() -> FastAPI:
    configure_logging(config.log_level())

    # Fail at startup, not on the first request, if a profile name is wrong
    config.quote_profile()
    config.comparison_profile()

    app = FastAPI(
        title="Auto Budget API",
        description="""
        Car budgeting engine: monthly payment estimates for loans and leases.

        ## Features
        - Browse the vehicle line-up and resolve a trim's MSRP
        - Price the selected loan or lease plan
        - Compare loan terms and lease term/mileage grids
        - Financing tips and monthly budget deficit check

        ## State
        Every endpoint is a pure recomputation; nothing is stored.

        ## Error Handling
        All errors return structured JSON responses with error codes.
        """,
        version="0.1.0",
        docs_url="/docs",
        redoc_url="/redoc",
        openapi_url="/openapi.json",
    )

    register_exception_handlers(app)

    app.include_router(health_router)
    app.include_router(vehicles_router, prefix="/v1")
    app.include_router(quotes_router, prefix="/v1")
    app.include_router(plans_router, prefix="/v1")

    return app


app = build_app()

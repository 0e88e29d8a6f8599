import logging

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from chelto.api import admin, cities, health, registrations
from chelto.core import config
from chelto.core.database import Base, engine

from chelto import models as _models  # noqa: F401


def create_app() -> FastAPI:
    logging.basicConfig(
        level=config.LOG_LEVEL,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    app = FastAPI(title="Chelto Launch API")

    # Routers
    app.include_router(health.router, prefix="/api")
    app.include_router(cities.router, prefix="/api")
    app.include_router(registrations.router, prefix="/api")
    app.include_router(admin.router, prefix="/api")

    # DB init
    @app.on_event("startup")
    def _startup_create_tables() -> None:
        Base.metadata.create_all(bind=engine)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=config.CORS_ORIGINS,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    return app


app = create_app()

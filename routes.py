# routes.py
from fastapi import FastAPI
from controller.catalog_controller import catalog_router
from controller.site_controller import site_router


def register_routes(app: FastAPI) -> None:
    """Register & Access control controllers here."""
    app.include_router(site_router)
    app.include_router(catalog_router)

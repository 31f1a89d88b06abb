# controller/catalog_controller.py
from fastapi import APIRouter, Depends
from model.site import Section, Theme
from service.catalog_service import CatalogService
from util.constants import InternalURIs

catalog_router = APIRouter()


@catalog_router.get(InternalURIs.SECTIONS, response_model=list[Section])
async def list_sections(svc: CatalogService = Depends(CatalogService)):
    return svc.sections()


@catalog_router.get(
    InternalURIs.THEMES, response_model=list[Theme], response_model_exclude_none=True
)
async def list_themes(svc: CatalogService = Depends(CatalogService)):
    return svc.themes()

# controller/site_controller.py
from fastapi import APIRouter, Depends, status
from model.api import (
    CreateSiteRequest,
    CreateSiteResponse,
    ValidateNameRequest,
    ValidateNameResponse,
)
from service.name_validation_service import NameValidationService
from service.provisioning_service import ProvisioningService
from util.constants import InternalURIs
from controller.controller_dependencies import (
    get_name_validation_service,
    get_provisioning_service,
)

site_router = APIRouter()


@site_router.post(
    InternalURIs.VALIDATE_SITE_NAME,
    response_model=ValidateNameResponse,
    response_model_exclude_none=True,
    status_code=status.HTTP_200_OK,
)
async def validate_site_name(
    payload: ValidateNameRequest,
    service: NameValidationService = Depends(get_name_validation_service),
) -> ValidateNameResponse:
    return service.check(payload.siteName)


@site_router.post(
    InternalURIs.SITES,
    response_model=CreateSiteResponse,
    response_model_exclude_none=True,
    status_code=status.HTTP_200_OK,
)
async def create_site(
    payload: CreateSiteRequest,
    service: ProvisioningService = Depends(get_provisioning_service),
) -> CreateSiteResponse:
    return await service.provision(payload)

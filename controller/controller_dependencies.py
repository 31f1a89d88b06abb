# controller/controller_dependencies.py
from fastapi import Depends, Request
from config.settings import Settings
from core.dns_client import DnsClient
from repository.site_repository import SiteRepository
from service.name_validation_service import NameValidationService
from service.provisioning_service import ProvisioningService


def get_settings(request: Request) -> Settings:
    return request.app.state.settings


def get_site_repository(settings: Settings = Depends(get_settings)) -> SiteRepository:
    return SiteRepository(settings.SITES_BASE_DIR)


def get_dns_client(settings: Settings = Depends(get_settings)) -> DnsClient:
    return DnsClient(
        settings.DNS_API_RRSETS,
        settings.DNS_API_AUTH,
        ttl=settings.DNS_TTL,
        timeout=settings.DNS_TIMEOUT_SECONDS,
    )


def get_name_validation_service(
    sites: SiteRepository = Depends(get_site_repository),
) -> NameValidationService:
    return NameValidationService(sites)


def get_provisioning_service(
    settings: Settings = Depends(get_settings),
    sites: SiteRepository = Depends(get_site_repository),
    validator: NameValidationService = Depends(get_name_validation_service),
    dns: DnsClient = Depends(get_dns_client),
) -> ProvisioningService:
    return ProvisioningService(
        validator,
        sites,
        dns,
        site_ip=settings.SITE_IP,
        parent_domain=settings.PARENT_DOMAIN,
    )

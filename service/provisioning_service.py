# service/provisioning_service.py
import logging
from core.dns_client import DnsClient
from model.api import CreateSiteRequest, CreateSiteResponse
from model.site import SiteRecord
from repository.site_repository import SiteRepository
from service.name_validation_service import NameValidationService
from util.enums import ErrorMessage, NameErrorReason, ProvisionState
from util.errors import (
    AppError,
    DnsError,
    SiteAlreadyExistsError,
    SiteNameError,
    StorageFailureError,
)

logger = logging.getLogger(__name__)


class ProvisioningService:
    """
    Validating -> Claiming -> Claimed -> PublishingDNS -> Done.

    - Validation failures and a lost claim race are ordinary user errors
      ({success: false}); nothing has been written at that point.
    - Storage failures are internal errors (HTTP 500).
    - Once the claim succeeds the request always ends in Done. The DNS step is
      best-effort: its failure is logged and never rolls back the claim.
    """

    def __init__(
        self,
        validator: NameValidationService,
        sites: SiteRepository,
        dns: DnsClient,
        *,
        site_ip: str,
        parent_domain: str,
        dns_best_effort: bool = True,
    ) -> None:
        self._validator = validator
        self._sites = sites
        self._dns = dns
        self._site_ip = site_ip
        self._parent_domain = parent_domain
        self._dns_best_effort = dns_best_effort

    def site_url(self, name: str) -> str:
        return f"https://{name}.{self._parent_domain}"

    @staticmethod
    def _enter(state: ProvisionState, name: str) -> None:
        logger.debug("provision.state name=%s state=%s", name, state.value)

    async def provision(self, req: CreateSiteRequest) -> CreateSiteResponse:
        self._enter(ProvisionState.VALIDATING, req.siteName)
        try:
            name = self._validator.validate(req.siteName)
        except SiteNameError as e:
            logger.info("provision.rejected reason=%s", e.reason.name)
            return CreateSiteResponse(success=False, error=str(e))
        except StorageFailureError as e:
            logger.error("provision.validate.error err=%s", e)
            raise AppError(
                ErrorMessage.INTERNAL_ERROR.value.message,
                ErrorMessage.INTERNAL_ERROR.value.http_status,
            )

        self._enter(ProvisionState.CLAIMING, name)
        record = SiteRecord(
            siteName=name,
            description=req.description,
            style=req.style,
            initialContent=req.initialContent,
        )
        try:
            self._sites.claim(name, record)
        except SiteAlreadyExistsError:
            # Lost the race against a concurrent claimant
            return CreateSiteResponse(
                success=False, error=NameErrorReason.ALREADY_EXISTS.value
            )
        except StorageFailureError as e:
            logger.error("provision.claim.error name=%s err=%s", name, e)
            raise AppError(
                ErrorMessage.INTERNAL_ERROR.value.message,
                ErrorMessage.INTERNAL_ERROR.value.http_status,
            )

        self._enter(ProvisionState.CLAIMED, name)
        self._enter(ProvisionState.PUBLISHING_DNS, name)
        try:
            await self._dns.create_address_record(name, self._site_ip)
        except DnsError as e:
            if not self._dns_best_effort:
                logger.error("provision.dns.failed name=%s err=%s", name, e)
                raise AppError(
                    ErrorMessage.INTERNAL_ERROR.value.message,
                    ErrorMessage.INTERNAL_ERROR.value.http_status,
                )
            # Claim is kept; the record has to be published out-of-band
            logger.warning(
                "provision.dns.failed name=%s err=%s best_effort=true", name, e
            )
        except Exception:
            if not self._dns_best_effort:
                raise
            # Claimed requests always reach Done
            logger.exception("provision.dns.crashed name=%s best_effort=true", name)

        self._enter(ProvisionState.DONE, name)
        url = self.site_url(name)
        logger.info("provision.ok name=%s url=%s", name, url)
        return CreateSiteResponse(success=True, siteUrl=url)

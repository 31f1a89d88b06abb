# service/name_validation_service.py
import re
import logging
from typing import Final
from model.api import ValidateNameResponse
from repository.site_repository import SiteRepository
from util.constants import RESERVED_SITE_NAMES
from util.enums import ErrorMessage, NameErrorReason
from util.errors import AppError, SiteNameError, StorageFailureError

logger = logging.getLogger(__name__)

SITE_NAME_PATTERN: Final[re.Pattern[str]] = re.compile(
    r"^[a-z0-9](?:[a-z0-9-]{0,61}[a-z0-9])?$"
)


class NameValidationService:
    """
    Checks a candidate site name: syntax, reserved words, then existence.
    Side-effect free; the existence check is advisory only, SiteRepository.claim
    is what actually guarantees uniqueness.
    """

    def __init__(self, sites: SiteRepository) -> None:
        self._sites = sites

    @staticmethod
    def normalize(raw_name: str) -> str:
        return raw_name.lower()

    def validate(self, raw_name: str) -> str:
        """Returns the normalized name or raises SiteNameError."""
        name = self.normalize(raw_name)
        if not SITE_NAME_PATTERN.fullmatch(name):
            raise SiteNameError(NameErrorReason.INVALID_SYNTAX)
        if name in RESERVED_SITE_NAMES:
            raise SiteNameError(NameErrorReason.RESERVED)
        if self._sites.exists(name):
            raise SiteNameError(NameErrorReason.ALREADY_EXISTS)
        return name

    def check(self, raw_name: str) -> ValidateNameResponse:
        try:
            self.validate(raw_name)
        except SiteNameError as e:
            logger.info("name.invalid reason=%s", e.reason.name)
            return ValidateNameResponse(valid=False, error=str(e))
        except StorageFailureError as e:
            logger.error("name.check.error err=%s", e)
            raise AppError(
                ErrorMessage.INTERNAL_ERROR.value.message,
                ErrorMessage.INTERNAL_ERROR.value.http_status,
            )
        return ValidateNameResponse(valid=True)

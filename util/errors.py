# util/errors.py
from fastapi import HTTPException, status
from util.enums import NameErrorReason


class AppError(HTTPException):
    # Flow: raise AppError to short-circuit with a typed status & message.
    def __init__(
        self, message: str, http_status: int = status.HTTP_400_BAD_REQUEST
    ) -> None:
        super().__init__(status_code=http_status, detail=message)


class SiteNameError(Exception):
    """User-facing rejection of a candidate name; message is shown verbatim."""

    def __init__(self, reason: NameErrorReason) -> None:
        super().__init__(reason.value)
        self.reason = reason


class SiteAlreadyExistsError(Exception):
    """The exclusive claim lost against an existing or concurrent claimant."""

    def __init__(self, name: str) -> None:
        super().__init__(f"site {name!r} already exists")
        self.name = name


class StorageFailureError(Exception):
    pass


class DnsError(Exception):
    pass


class DnsConfigMissingError(DnsError):
    def __init__(self) -> None:
        super().__init__("DNS API config missing")


class DnsNetworkError(DnsError):
    pass


class DnsUnexpectedStatusError(DnsError):
    def __init__(self, status_code: int) -> None:
        super().__init__(f"unexpected status code: {status_code}")
        self.status_code = status_code

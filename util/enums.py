# util/enums.py
from enum import Enum
from typing import NamedTuple
from fastapi import status


class Color(str, Enum):
    RESET = "\033[0m"
    RED = "\033[31m"
    GREEN = "\033[32m"
    YELLOW = "\033[33m"
    BLUE = "\033[34m"
    MAGENTA = "\033[35m"
    CYAN = "\033[36m"
    BOLD = "\033[1m"

    def __str__(self):
        return self.value


class Environment(str, Enum):
    DEV = "dev"
    PROD = "prod"


class NameErrorReason(str, Enum):
    INVALID_SYNTAX = "site name must be 1-63 characters, letters, digits, or hyphens; cannot start or end with hyphen"
    RESERVED = "site name is reserved or forbidden"
    ALREADY_EXISTS = "site name already exists"


class ProvisionState(str, Enum):
    VALIDATING = "validating"
    CLAIMING = "claiming"
    CLAIMED = "claimed"
    PUBLISHING_DNS = "publishing_dns"
    DONE = "done"


class ErrorInfo(NamedTuple):
    message: str
    http_status: int


class ErrorMessage(Enum):
    INVALID_REQUEST = ErrorInfo("Invalid JSON request", status.HTTP_400_BAD_REQUEST)
    INTERNAL_ERROR = ErrorInfo(
        "Internal Error", status.HTTP_500_INTERNAL_SERVER_ERROR
    )

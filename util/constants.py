# util/constants.py
from typing import Final


class InternalURIs:
    API = "/api"
    HEALTH = API + "/health"
    SITES = API + "/sites"
    VALIDATE_SITE_NAME = SITES + "/validate-name"
    SECTIONS = API + "/sections"
    THEMES = API + "/themes"


# Subdomains that can never be handed out as sites.
RESERVED_SITE_NAMES: Final[frozenset[str]] = frozenset(
    {"www", "mail", "ftp", "admin", "api"}
)

SITE_CONFIG_FILE: Final[str] = "config.json"

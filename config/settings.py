# config/settings.py
import os
import sys
from dotenv import load_dotenv
from pydantic import ValidationError, Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict
from util.enums import Environment
import logging


if os.getenv("APP_ENV", Environment.DEV) == Environment.DEV:
    load_dotenv()

_log = logging.getLogger("config.settings")


class Settings(BaseSettings):
    model_config = SettingsConfigDict(frozen=True)

    # App
    APP_ENV: str = Field(default=Environment.DEV.value, validation_alias="APP_ENV")
    VERSION: str = Field(default="dev", validation_alias="VERSION")
    SERVER_HOST: str = Field(default="127.0.0.1", validation_alias="SERVER_HOST")
    # 0 lets the OS pick a free port
    SERVER_PORT: int = Field(default=0, validation_alias="SERVER_PORT")

    # Site storage
    SITES_BASE_DIR: str = Field(default="", validation_alias="SITES_BASE_DIR")
    SITE_IP: str = Field(..., min_length=1, validation_alias="SITE_IP")
    PARENT_DOMAIN: str = Field(default="flox.click", validation_alias="PARENT_DOMAIN")

    # DNS provider (rrsets endpoint + token)
    DNS_API_RRSETS: str | None = Field(default=None, validation_alias="DNS_API_RRSETS")
    DNS_API_AUTH: str | None = Field(default=None, validation_alias="DNS_API_AUTH")
    DNS_TTL: int = Field(default=3600, validation_alias="DNS_TTL")
    DNS_TIMEOUT_SECONDS: float = Field(
        default=10.0, gt=0, validation_alias="DNS_TIMEOUT_SECONDS"
    )

    # CORS
    ALLOWED_ORIGINS: list[str] = Field(
        default=[
            "https://flox.click",
            "https://www.flox.click",
            "https://app.flox.click",
            "http://localhost:3000",
            "http://127.0.0.1:3000",
        ],
        validation_alias="ALLOWED_ORIGINS",
    )

    # Logging knobs
    LOGGER_NAME: str = "flox-backend"
    LOG_LEVEL: str = Field(default="INFO", validation_alias="LOG_LEVEL")
    LOG_TO_FILE: bool = Field(default=False, validation_alias="LOG_TO_FILE")
    LOG_DIR: str = Field(default="logs", validation_alias="LOG_DIR")
    LOG_FILE_NAME: str = Field(default="app.log", validation_alias="LOG_FILE_NAME")
    LOG_MAX_BYTES: int = Field(
        default=50 * 1024 * 1024, validation_alias="LOG_MAX_BYTES"
    )
    LOG_BACKUP_COUNT: int = Field(default=5, validation_alias="LOG_BACKUP_COUNT")

    @field_validator("SERVER_PORT", mode="before")
    @classmethod
    def _port_or_auto(cls, v):
        try:
            port = int(v)
        except (TypeError, ValueError):
            port = -1
        if 0 <= port <= 65535:
            return port
        _log.warning(
            "Invalid SERVER_PORT %r, falling back to automatic port selection", v
        )
        return 0

    @field_validator("SITES_BASE_DIR")
    @classmethod
    def _default_sites_dir(cls, v: str) -> str:
        return v or os.path.join(os.getcwd(), "sites")

    # Runs before min_length so a blank SITE_IP still fails startup
    @field_validator("SITE_IP", "DNS_API_RRSETS", "DNS_API_AUTH", mode="before")
    @classmethod
    def _strip(cls, v):
        return v.strip() if isinstance(v, str) else v


def load_settings(**overrides) -> Settings:
    """
    Build the immutable settings value once per process.
    Precedence per field: overrides (CLI flags) > environment > .env > defaults.
    Exits the process when required values are missing or invalid.
    """
    overrides = {k: v for k, v in overrides.items() if v is not None}
    try:
        return Settings(**overrides)
    except ValidationError as e:
        print("❌ Missing/invalid environment variables:", file=sys.stderr)
        for err in e.errors():
            loc = ".".join(str(x) for x in err.get("loc", []))
            msg = err.get("msg", "")
            print(f" - {loc}: {msg}", file=sys.stderr)
        sys.exit(1)
    except Exception as e:
        print(f"❌ Settings initialization failed: {e}", file=sys.stderr)
        sys.exit(1)


settings = load_settings()

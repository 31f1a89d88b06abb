# model/api.py
from pydantic import BaseModel


class ValidateNameRequest(BaseModel):
    siteName: str = ""


class ValidateNameResponse(BaseModel):
    valid: bool
    error: str | None = None


class CreateSiteRequest(BaseModel):
    siteName: str = ""
    description: str | None = None
    style: str | None = None
    initialContent: list[str] | None = None


class CreateSiteResponse(BaseModel):
    success: bool
    siteUrl: str | None = None
    error: str | None = None


class HealthResponse(BaseModel):
    status: str
    version: str

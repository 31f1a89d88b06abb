"""Shared pytest fixtures for the site provisioning API tests."""

from __future__ import annotations

import json
import os

# Settings are built at import time; keep .env out and satisfy required values.
os.environ["APP_ENV"] = "prod"
os.environ.setdefault("SITE_IP", "127.0.0.1")

from pathlib import Path
from typing import Callable

import httpx
import pytest
from fastapi.testclient import TestClient

from config.settings import Settings
from controller.controller_dependencies import get_dns_client
from core.dns_client import DnsClient
from main import create_app
from repository.site_repository import SiteRepository
from service.name_validation_service import NameValidationService

SITE_IP = "203.0.113.7"
DNS_ENDPOINT = "desec.example.test/api/v1/domains/flox.click/rrsets/"


class DnsRecorder:
    """MockTransport handler that records requests and replies with a fixed status."""

    def __init__(self, status_code: int = 201, exc: Exception | None = None) -> None:
        self.status_code = status_code
        self.exc = exc
        self.requests: list[httpx.Request] = []

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        if self.exc is not None:
            raise self.exc
        return httpx.Response(self.status_code, json={})

    @property
    def payloads(self) -> list[dict]:
        return [json.loads(r.content) for r in self.requests]


@pytest.fixture
def sites_root(tmp_path: Path) -> Path:
    root = tmp_path / "sites"
    root.mkdir()
    return root


@pytest.fixture
def repo(sites_root: Path) -> SiteRepository:
    return SiteRepository(str(sites_root))


@pytest.fixture
def validator(repo: SiteRepository) -> NameValidationService:
    return NameValidationService(repo)


@pytest.fixture
def dns_recorder() -> DnsRecorder:
    return DnsRecorder()


@pytest.fixture
def make_dns() -> Callable[..., DnsClient]:
    def _make(
        handler: Callable[[httpx.Request], httpx.Response],
        endpoint: str | None = DNS_ENDPOINT,
        token: str | None = "Token s3cret",
    ) -> DnsClient:
        return DnsClient(endpoint, token, transport=httpx.MockTransport(handler))

    return _make


@pytest.fixture
def app_settings(sites_root: Path) -> Settings:
    return Settings(
        SITES_BASE_DIR=str(sites_root),
        SITE_IP=SITE_IP,
        DNS_API_RRSETS=DNS_ENDPOINT,
        DNS_API_AUTH="Token s3cret",
        PARENT_DOMAIN="flox.click",
        VERSION="1.2.3",
    )


@pytest.fixture
def client(app_settings: Settings, make_dns, dns_recorder: DnsRecorder):
    app = create_app(app_settings)
    app.dependency_overrides[get_dns_client] = lambda: make_dns(dns_recorder)
    with TestClient(app) as c:
        yield c

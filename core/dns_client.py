# core/dns_client.py
import logging
import httpx
from fastapi import status
from util.errors import (
    DnsConfigMissingError,
    DnsNetworkError,
    DnsUnexpectedStatusError,
)
from util.timing import timed

logger = logging.getLogger(__name__)


def _endpoint_url(endpoint: str) -> str:
    # Provider config carries host/path only; https is assumed
    if endpoint.startswith(("http://", "https://")):
        return endpoint
    return "https://" + endpoint


def _auth_header(token: str) -> str:
    # Clean token string (in case of extra quotes)
    token = token.strip().strip('"')
    if " " in token:
        # Already carries a scheme, e.g. "Token abc" or "Bearer abc"
        return token
    return f"Bearer {token}"


class DnsClient:
    """
    Creates forward A records against an rrsets-style DNS API.

    One synchronous attempt per call, no retry. Anything other than 201 Created
    is a failure. Nothing is compensated on failure; callers decide the policy.
    """

    def __init__(
        self,
        endpoint: str | None,
        token: str | None,
        ttl: int = 3600,
        timeout: float = 10.0,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self._endpoint = endpoint
        self._token = token
        self._ttl = ttl
        self._timeout = timeout
        self._transport = transport

    def build_payload(self, subdomain: str, ip_address: str) -> dict:
        return {
            "subname": subdomain,
            "type": "A",
            "ttl": self._ttl,
            "records": [ip_address],
        }

    async def create_address_record(self, subdomain: str, ip_address: str) -> None:
        if not self._endpoint or not self._token:
            raise DnsConfigMissingError()

        url = _endpoint_url(self._endpoint)
        headers = {
            "Authorization": _auth_header(self._token),
            "Content-Type": "application/json",
        }
        payload = self.build_payload(subdomain, ip_address)

        try:
            with timed(logger, "dns.create", subdomain=subdomain):
                async with httpx.AsyncClient(
                    timeout=self._timeout, transport=self._transport
                ) as client:
                    res = await client.post(url, headers=headers, json=payload)
        except httpx.RequestError as e:
            logger.error("dns.request_error name=%s err=%s", subdomain, type(e).__name__)
            raise DnsNetworkError(f"HTTP request failed: {e}") from e

        if res.status_code != status.HTTP_201_CREATED:
            logger.error(
                "dns.unexpected name=%s status=%d", subdomain, res.status_code
            )
            raise DnsUnexpectedStatusError(res.status_code)

        logger.info("dns.created name=%s ip=%s", subdomain, ip_address)

"""Applicant registry - maps personal codes to credit modifiers"""

from typing import Mapping, Optional, Protocol
from urllib.parse import quote

import httpx

from loan_gateway.config import Settings, settings
from loan_gateway.domain.exceptions import RegistryUnavailableError

DEFAULT_MODIFIERS: dict[str, int] = {
    "49002010965": 0,  # existing debt
    "49002010976": 100,
    "49002010987": 300,
    "49002010998": 1000,
}


class ApplicantRegistry(Protocol):
    """Lookup capability for applicant credit modifiers"""

    async def lookup(self, personal_code: str) -> Optional[int]:
        """Return the credit modifier, or None for an unknown applicant"""
        ...


class InMemoryApplicantRegistry:
    """Registry backed by a fixed mapping"""

    def __init__(self, modifiers: Mapping[str, int] | None = None):
        self._modifiers = dict(DEFAULT_MODIFIERS if modifiers is None else modifiers)

    async def lookup(self, personal_code: str) -> Optional[int]:
        return self._modifiers.get(personal_code)


class HttpApplicantRegistry:
    """Client for a remote applicant registry API"""

    def __init__(
        self,
        base_url: str | None = None,
        timeout: float | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ):
        self.base_url = settings.registry_api_base if base_url is None else base_url
        self.timeout = settings.http_timeout_seconds if timeout is None else timeout
        self.transport = transport

    async def lookup(self, personal_code: str) -> Optional[int]:
        """
        Fetch the credit modifier for a personal code.

        Returns:
            Modifier, or None when the registry answers 404

        Raises:
            RegistryUnavailableError: On timeout, HTTP errors, or invalid response
        """
        # Empty and dot-segment codes would resolve to a different resource
        if personal_code in ("", ".", ".."):
            return None

        async with httpx.AsyncClient(timeout=self.timeout, transport=self.transport) as client:
            try:
                response = await client.get(f"{self.base_url}/applicants/{quote(personal_code, safe='')}")
                if response.status_code == 404:
                    return None
                response.raise_for_status()
                modifier = response.json()["credit_modifier"]

                if not isinstance(modifier, int) or isinstance(modifier, bool) or modifier < 0:
                    raise ValueError(f"bad credit modifier {modifier!r}")
                return modifier

            except httpx.TimeoutException as e:
                raise RegistryUnavailableError(f"Registry timeout after {self.timeout}s") from e
            except httpx.HTTPStatusError as e:
                raise RegistryUnavailableError(f"Registry error: {e.response.status_code}") from e
            except httpx.RequestError as e:
                raise RegistryUnavailableError(f"Registry unreachable: {e}") from e
            except (KeyError, ValueError, TypeError) as e:
                raise RegistryUnavailableError(f"Invalid applicant data from registry: {e}") from e


def build_registry(config: Settings = settings) -> ApplicantRegistry:
    """Select the registry backend from configuration"""
    if config.registry_backend == "http":
        return HttpApplicantRegistry(
            base_url=config.registry_api_base,
            timeout=config.http_timeout_seconds,
        )
    return InMemoryApplicantRegistry()

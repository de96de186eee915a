# SPDX-License-Identifier: Apache-2.0
# This file was created or modified with the assistance of an AI (Large Language Model).
"""Minimal LibreNMS v0 API client used to poll port traffic."""

from __future__ import annotations

import logging
import os
from typing import Any
from urllib.parse import quote

import httpx
from pydantic import BaseModel, ConfigDict, Field

logger = logging.getLogger(__name__)


class WeathermapError(Exception):
    """Base class for errors raised while collecting weathermap data."""


class ConfigurationError(WeathermapError):
    """Raised when required settings are missing."""


class LibreNMSError(WeathermapError):
    """Raised when the LibreNMS API request fails."""


class DeviceNotFoundError(LibreNMSError):
    """Raised when a hostname does not resolve to a LibreNMS device."""


class LibreNMSSettings(BaseModel):
    model_config = ConfigDict(frozen=True)

    server: str
    token: str
    timeout: float = Field(default=10.0, gt=0)

    @classmethod
    def from_env(cls) -> "LibreNMSSettings":
        token = os.environ.get("LIBRENMS_TOKEN")
        if not token:
            raise ConfigurationError("LIBRENMS_TOKEN is not set")
        server = os.environ.get("LIBRENMS_SERVER")
        if not server:
            raise ConfigurationError("LIBRENMS_SERVER is not set")
        return cls(server=server, token=token)


class LibreNMSClient:
    def __init__(self, settings: LibreNMSSettings, transport: httpx.BaseTransport | None = None):
        self.settings = settings
        self._client = httpx.Client(
            base_url=settings.server,
            headers={"X-Auth-Token": settings.token},
            timeout=settings.timeout,
            transport=transport,
        )

    def __enter__(self) -> "LibreNMSClient":
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()

    def close(self) -> None:
        self._client.close()

    def get(self, path: str) -> Any:
        try:
            response = self._client.get(path)
        except httpx.HTTPError as exc:
            raise LibreNMSError(f"Failed to fetch {path}: {exc}") from exc
        if not response.is_success:
            raise LibreNMSError(
                f"Failed to fetch {path}: {response.status_code} {response.reason_phrase}"
            )
        logger.debug("Fetched %s", path)
        return response.json()

    def device_id(self, hostname: str) -> int:
        data = self.get(f"/api/v0/devices/{quote(hostname, safe='')}") or {}
        devices = data.get("devices") or []
        device_id = devices[0].get("device_id") if devices else None
        if device_id is None:
            raise DeviceNotFoundError(f"Device not found: {hostname}")
        return int(device_id)

    def ports(self, device_id: int) -> list[dict[str, Any]]:
        data = self.get(f"/api/v0/ports/search/device_id/{device_id}") or {}
        return list(data.get("ports") or [])

    def port(self, port_id: int) -> dict[str, Any] | None:
        data = self.get(f"/api/v0/ports/{port_id}") or {}
        ports = data.get("port") or []
        return ports[0] if ports else None

"""HTTP client for the provider's public JSON endpoints."""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any, Optional

import httpx

from fplpoints.config import Settings


logger = logging.getLogger(__name__)

BOOTSTRAP_PATH = "bootstrap-static/"
FIXTURES_PATH = "fixtures/"


class FplClient:
    """Thin wrapper over :class:`httpx.Client` for bootstrap and fixture data."""

    def __init__(
        self,
        base_url: Optional[str] = None,
        *,
        timeout: Optional[float] = None,
        transport: Optional[httpx.BaseTransport] = None,
    ):
        settings = Settings.from_env()
        self.base_url = base_url or settings.base_url
        self._client = httpx.Client(
            base_url=self.base_url,
            timeout=timeout if timeout is not None else settings.timeout,
            transport=transport,
            headers={"Accept": "application/json"},
        )

    def __enter__(self) -> "FplClient":
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()

    def close(self) -> None:
        self._client.close()

    def _get(self, path: str, params: Optional[dict[str, Any]] = None) -> Any:
        logger.debug("GET %s%s params=%s", self.base_url, path, params)
        resp = self._client.get(path, params=params)
        resp.raise_for_status()
        return resp.json()

    def bootstrap(self) -> Any:
        return self._get(BOOTSTRAP_PATH)

    def fixtures(self, event: Optional[int] = None) -> Any:
        params = {"event": event} if event is not None else None
        return self._get(FIXTURES_PATH, params=params)


def load_json(path: Path) -> Any:
    return json.loads(path.read_text(encoding="utf-8"))


def save_json(payload: Any, path: Path) -> None:
    path.write_text(json.dumps(payload, indent=2), encoding="utf-8")


__all__ = ["FplClient", "load_json", "save_json"]

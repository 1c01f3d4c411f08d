"""Authentication helpers for the Kite MCP server."""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from typing import Any, Optional

from dotenv import load_dotenv
from kiteconnect import KiteConnect

logger = logging.getLogger(__name__)

TRUTHY = {"1", "true", "yes", "on"}


@dataclass(frozen=True)
class KiteSession:
    """API credentials plus the client built from them.

    ``client`` is ``None`` when no API key was configured.
    """

    api_key: Optional[str]
    access_token: Optional[str]
    client: Optional[KiteConnect]

    @property
    def is_authenticated(self) -> bool:
        return self.client is not None and bool(self.access_token)


def load_environment() -> None:
    load_dotenv()


def _getenv(*names: str) -> Optional[str]:
    for name in names:
        value = os.getenv(name)
        if value:
            return value
    return None


def get_credentials() -> tuple[Optional[str], Optional[str]]:
    load_environment()
    api_key = _getenv("API_KEY", "KITE_API_KEY")
    access_token = _getenv("ACCESS_TOKEN", "KITE_ACCESS_TOKEN")
    return api_key, access_token


def get_client_options() -> dict[str, Any]:
    """Optional KiteConnect constructor arguments from the environment."""
    options: dict[str, Any] = {}
    root = os.getenv("KITE_ROOT")
    if root:
        options["root"] = root
    timeout = os.getenv("KITE_TIMEOUT")
    if timeout:
        try:
            options["timeout"] = float(timeout)
        except ValueError:
            logger.warning("Ignoring invalid KITE_TIMEOUT value: %r", timeout)
    if (os.getenv("KITE_DEBUG") or "").strip().lower() in TRUTHY:
        options["debug"] = True
    return options


def get_session() -> KiteSession:
    """Build the Kite session from environment configuration.

    A missing API key is logged and leaves the client unset; every tool
    call then fails with an initialization error.
    """
    api_key, access_token = get_credentials()
    if not api_key:
        logger.error("API_KEY is required")
        return KiteSession(api_key=None, access_token=access_token, client=None)

    client = KiteConnect(api_key=api_key, **get_client_options())
    if access_token:
        client.set_access_token(access_token)
        logger.info("Kite Connect initialized with access token")
    else:
        logger.warning("No access token provided. Some operations may require authentication.")
    return KiteSession(api_key=api_key, access_token=access_token, client=client)

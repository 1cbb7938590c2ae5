"""Shared HTTP plumbing for the open-data provider clients."""

import logging
from typing import Any, Dict, Optional

import requests

from twcompany.core.config import get_settings

logger = logging.getLogger(__name__)
_SESSION = requests.Session()


class ProviderError(RuntimeError):
    """Raised when a provider call fails or returns a payload we cannot use."""

    def __init__(self, provider: str, message: str) -> None:
        super().__init__(message)
        self.provider = provider


def get_json(provider: str, url: str, params: Dict[str, Any], timeout: float) -> Optional[Any]:
    """GET ``url`` and decode its JSON body; an empty body decodes to ``None``."""
    headers = {"User-Agent": get_settings().user_agent}
    logger.info("Calling %s url=%s params=%s", provider, url, params)
    try:
        response = _SESSION.get(url, params=params, timeout=timeout, headers=headers)
        response.raise_for_status()
    except requests.RequestException as exc:
        raise ProviderError(provider, str(exc)) from exc

    if not response.text.strip():
        return None
    try:
        return response.json()
    except ValueError as exc:
        logger.error("%s returned a non-JSON body: %s", provider, response.text[:200])
        raise ProviderError(provider, f"{provider} returned a malformed body") from exc

"""Application configuration helpers."""

import logging
import os
from dataclasses import dataclass
from functools import lru_cache

from dotenv import load_dotenv

logger = logging.getLogger(__name__)

DEFAULT_USER_AGENT = "Mozilla/5.0 (Windows NT 10.0; Win64; x64) AppleWebKit/537.36"
DEFAULT_FINMIND_URL = "https://finmindapi.serveo.net/api/taiwan_stock_info"


class ConfigError(RuntimeError):
    """Raised when an environment value cannot be parsed."""


@dataclass(frozen=True)
class Settings:
    port: int = 8080
    log_level: str = "INFO"
    user_agent: str = DEFAULT_USER_AGENT
    gcis_timeout: float = 15.0
    fallback_timeout: float = 10.0
    gcis_top: int = 10
    opendata_vip_url: str = "https://opendata.vip/data/company"
    g0v_search_url: str = "https://company.g0v.ronny.tw/api/search"
    gcis_base_url: str = "https://data.gcis.nat.gov.tw/od/data/api"
    finmind_url: str = DEFAULT_FINMIND_URL


def _get_number(name: str, default: str, cast):
    raw = os.getenv(name) or default
    try:
        return cast(raw)
    except ValueError as exc:
        raise ConfigError(f"{name} must be numeric, got {raw!r}") from exc


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Load settings from environment variables with sensible defaults."""
    load_dotenv()

    port = _get_number("PORT", "8080", int)
    gcis_timeout = _get_number("GCIS_TIMEOUT", "15", float)
    fallback_timeout = _get_number("FALLBACK_TIMEOUT", "10", float)
    gcis_top = _get_number("GCIS_TOP", "10", int)
    log_level = (os.getenv("LOG_LEVEL") or "INFO").strip().upper()
    user_agent = os.getenv("HTTP_USER_AGENT") or DEFAULT_USER_AGENT
    finmind_url = os.getenv("FINMIND_URL") or DEFAULT_FINMIND_URL

    if finmind_url == DEFAULT_FINMIND_URL:
        logger.warning("FINMIND_URL uses the default relay host; registry fallback results are unofficial.")

    return Settings(
        port=port,
        log_level=log_level,
        user_agent=user_agent,
        gcis_timeout=gcis_timeout,
        fallback_timeout=fallback_timeout,
        gcis_top=gcis_top,
        opendata_vip_url=os.getenv("OPENDATA_VIP_URL") or Settings.opendata_vip_url,
        g0v_search_url=os.getenv("G0V_SEARCH_URL") or Settings.g0v_search_url,
        gcis_base_url=(os.getenv("GCIS_BASE_URL") or Settings.gcis_base_url).rstrip("/"),
        finmind_url=finmind_url,
    )

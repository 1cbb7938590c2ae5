"""Clients for the third-party aggregators and the registry backup relay."""

import logging
from typing import Any, List

from twcompany.core.config import get_settings
from twcompany.core.models import CompanyRecord
from twcompany.etl.transform import from_finmind, from_g0v, from_opendata_vip, normalize_records
from twcompany.vendors.http import ProviderError, get_json

logger = logging.getLogger(__name__)

OPENDATA_VIP = "opendata_vip"
G0V = "g0v"
FINMIND = "finmind"
FINMIND_DATASET = "TaiwanCompanyInfo"


def _data_list(provider: str, payload: Any) -> List[Any]:
    """g0v and the FinMind relay wrap rows as ``{"data": [...]}``."""
    rows = payload.get("data") if isinstance(payload, dict) else None
    if not isinstance(rows, list):
        logger.warning("%s response has no data list: %s", provider, str(payload)[:200])
        raise ProviderError(provider, f"{provider} response has no data list")
    return rows


def search_opendata_vip(keyword: str) -> List[CompanyRecord]:
    settings = get_settings()
    payload = get_json(
        OPENDATA_VIP, settings.opendata_vip_url, {"keyword": keyword}, settings.fallback_timeout
    )
    if isinstance(payload, list):
        rows = payload
    elif isinstance(payload, dict) and isinstance(payload.get("data"), list):
        rows = payload["data"]
    elif isinstance(payload, dict) and payload:
        rows = [payload]
    else:
        logger.warning("opendata.vip returned an unusable payload: %s", str(payload)[:200])
        raise ProviderError(OPENDATA_VIP, "API 回應格式錯誤")
    return normalize_records(rows, from_opendata_vip)


def search_g0v(keyword: str) -> List[CompanyRecord]:
    settings = get_settings()
    payload = get_json(G0V, settings.g0v_search_url, {"q": keyword}, settings.fallback_timeout)
    return normalize_records(_data_list(G0V, payload), from_g0v)


def search_finmind(keyword: str) -> List[CompanyRecord]:
    settings = get_settings()
    params = {"dataset": FINMIND_DATASET, "data_id": keyword}
    payload = get_json(FINMIND, settings.finmind_url, params, settings.fallback_timeout)
    return normalize_records(_data_list(FINMIND, payload), from_finmind)

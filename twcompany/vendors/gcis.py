"""Client for the GCIS (經濟部商工登記) open-data OData endpoints."""

import logging
import re
from enum import Enum
from typing import Any, Dict, List

from twcompany.core.config import get_settings
from twcompany.core.models import CompanyRecord
from twcompany.etl.transform import from_gcis, normalize_records
from twcompany.vendors.http import ProviderError, get_json

logger = logging.getLogger(__name__)

PROVIDER = "gcis"
BY_ID_DATASET = "9D17AE0D-09B5-4732-A8F4-81ADED04B679"
BY_NAME_DATASET = "6BBA2268-1367-4B42-9CCA-BC17499EBE8C"
ACTIVE_STATUS = "01"

_REGISTRATION_ID = re.compile(r"^\d{8}$")


class KeywordKind(str, Enum):
    REGISTRATION_ID = "registration_id"
    NAME = "name"


def classify_keyword(keyword: str) -> KeywordKind:
    if _REGISTRATION_ID.match(keyword.strip()):
        return KeywordKind.REGISTRATION_ID
    return KeywordKind.NAME


def build_registry_filter(keyword: str) -> str:
    keyword = keyword.strip()
    if classify_keyword(keyword) is KeywordKind.REGISTRATION_ID:
        return f"Business_Accounting_NO eq {keyword}"
    return f"Company_Name like {keyword} and Company_Status eq {ACTIVE_STATUS}"


def dataset_url(kind: KeywordKind) -> str:
    dataset = BY_ID_DATASET if kind is KeywordKind.REGISTRATION_ID else BY_NAME_DATASET
    return f"{get_settings().gcis_base_url}/{dataset}"


def search(keyword: str) -> List[CompanyRecord]:
    """Query the ID or the name dataset depending on what the keyword looks like."""
    settings = get_settings()
    kind = classify_keyword(keyword)
    params: Dict[str, Any] = {
        "$format": "json",
        "$filter": build_registry_filter(keyword),
        "$top": settings.gcis_top,
    }
    payload = get_json(PROVIDER, dataset_url(kind), params, settings.gcis_timeout)

    if payload is None:
        logger.info("GCIS returned no rows for %s lookup", kind.value)
        return []
    if isinstance(payload, dict):
        payload = [payload]
    if not isinstance(payload, list):
        raise ProviderError(PROVIDER, f"unexpected GCIS payload type: {type(payload).__name__}")
    return normalize_records(payload, from_gcis)

"""Utilities for transforming provider payloads into CompanyRecord objects."""

import logging
from typing import Any, Callable, Dict, Iterable, List, Optional

from twcompany.core.models import CompanyRecord

logger = logging.getLogger(__name__)

SOURCE_GCIS = "經濟部商工登記資料"
SOURCE_OPENDATA_VIP = "第三方 API (opendata.vip)"
SOURCE_G0V = "第三方 API (g0v)"
SOURCE_FINMIND = "財政部開放資料 (備用來源)"

STATUS_APPROVED = "核准設立"
STATUS_OPERATING = "營業中"


def first_of(raw: Dict[str, Any], *keys: str, default: str = "") -> str:
    for key in keys:
        value = raw.get(key)
        if value is None:
            continue
        value_str = str(value).strip()
        if value_str:
            return value_str
    return default


def _parse_int(value: Any) -> Optional[int]:
    if value is None or isinstance(value, bool):
        return None
    if isinstance(value, int):
        return value
    text = str(value).strip().replace(",", "")
    if not text:
        return None
    try:
        return int(text)
    except ValueError:
        pass
    try:
        return int(float(text))
    except (ValueError, OverflowError):
        return None


def format_capital(value: Any) -> str:
    """Render a capital amount as ``NT$ 1,234,567``; missing or zero amounts render empty."""
    amount = _parse_int(value)
    if not amount:
        return ""
    return f"NT$ {amount:,}"


def _business_items(value: Any) -> str:
    if isinstance(value, list):
        items = []
        for item in value:
            if isinstance(item, dict):
                desc = first_of(item, "Business_Item_Desc", "Business_Item")
            else:
                desc = str(item).strip() if item is not None else ""
            if desc:
                items.append(desc)
        return "、".join(items)
    if value is None:
        return ""
    return str(value).strip()


def _date_text(value: Any) -> str:
    # g0v returns dates as {"year": 2010, "month": 1, "day": 5}
    if isinstance(value, dict):
        try:
            return f"{int(value['year']):04d}/{int(value['month']):02d}/{int(value['day']):02d}"
        except (KeyError, TypeError, ValueError):
            return ""
    if value is None:
        return ""
    return str(value).strip()


def from_gcis(raw: Dict[str, Any]) -> CompanyRecord:
    capital = raw.get("Capital_Stock_Amount") or raw.get("Paid_In_Capital_Amount")
    return CompanyRecord(
        registration_id=first_of(raw, "Business_Accounting_NO", "統一編號"),
        name=first_of(raw, "Company_Name", "公司名稱"),
        status=first_of(raw, "Company_Status_Desc", "Company_Status", default=STATUS_APPROVED),
        capital=format_capital(capital),
        representative=first_of(raw, "Responsible_Name", "代表人"),
        address=first_of(raw, "Company_Location", "地址"),
        registered_address=first_of(raw, "Register_Organization_Desc"),
        business_items=_business_items(raw.get("Cmp_Business")),
        founded=first_of(raw, "Company_Setup_Date", "設立日期"),
        source=SOURCE_GCIS,
    )


def from_opendata_vip(raw: Dict[str, Any]) -> CompanyRecord:
    return CompanyRecord(
        registration_id=first_of(raw, "Business_Accounting_NO", "統一編號", "編號"),
        name=first_of(raw, "Company_Name", "公司名稱", "名稱"),
        status=first_of(raw, "Company_Status_Desc", "狀態", default=STATUS_OPERATING),
        capital=format_capital(raw.get("Capital_Stock_Amount")),
        representative=first_of(raw, "Responsible_Name", "代表人"),
        address=first_of(raw, "Company_Location", "地址"),
        founded=first_of(raw, "Company_Setup_Date", "設立日期"),
        source=SOURCE_OPENDATA_VIP,
    )


def from_g0v(raw: Dict[str, Any]) -> CompanyRecord:
    return CompanyRecord(
        registration_id=first_of(raw, "統一編號"),
        name=first_of(raw, "公司名稱"),
        status=first_of(raw, "公司狀態", default=STATUS_OPERATING),
        capital=format_capital(raw.get("資本總額(元)")),
        representative=first_of(raw, "代表人姓名"),
        address=first_of(raw, "公司所在地"),
        founded=_date_text(raw.get("核准設立日期")),
        source=SOURCE_G0V,
    )


def from_finmind(raw: Dict[str, Any]) -> CompanyRecord:
    return CompanyRecord(
        registration_id=first_of(raw, "stock_id", "統一編號"),
        name=first_of(raw, "stock_name", "公司名稱"),
        status=STATUS_OPERATING,
        capital=format_capital(raw.get("capital")),
        representative=first_of(raw, "chairman", "代表人"),
        address=first_of(raw, "address", "地址"),
        source=SOURCE_FINMIND,
    )


def normalize_records(
    raws: Iterable[Any], normalizer: Callable[[Dict[str, Any]], CompanyRecord]
) -> List[CompanyRecord]:
    """Map raw provider rows and keep only the ones that resolve to a company name."""
    records: List[CompanyRecord] = []
    for raw in raws or []:
        if not isinstance(raw, dict):
            logger.debug("Skipping non-object row: %r", raw)
            continue
        record = normalizer(raw)
        if not record.name:
            logger.debug("Skipping row without company name: %s", list(raw.keys())[:10])
            continue
        records.append(record)
    return records

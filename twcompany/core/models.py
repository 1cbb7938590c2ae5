"""Core data models shared by the lookup providers and the HTTP layer."""

from __future__ import annotations

from dataclasses import asdict, dataclass, field
from typing import Any, Dict, List


@dataclass(slots=True)
class CompanyRecord:
    """Normalized company snapshot, independent of the provider that supplied it."""

    registration_id: str = ""
    name: str = ""
    status: str = ""
    capital: str = ""
    representative: str = ""
    address: str = ""
    registered_address: str = ""
    business_items: str = ""
    founded: str = ""
    source: str = ""

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


@dataclass(slots=True)
class LookupResult:
    provider: str
    records: List[CompanyRecord] = field(default_factory=list)

    @property
    def count(self) -> int:
        return len(self.records)

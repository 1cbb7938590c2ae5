"""Provider chains: try each open-data source in order until one answers."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Callable, Dict, List, Sequence

from twcompany.core.models import CompanyRecord, LookupResult
from twcompany.vendors import aggregators, gcis

logger = logging.getLogger(__name__)

THIRDPARTY = "thirdparty"
REGISTRY = "registry"


@dataclass(frozen=True)
class Provider:
    name: str
    fetch: Callable[[str], List[CompanyRecord]]


class ProvidersExhausted(RuntimeError):
    """Raised when every provider in a chain failed."""

    def __init__(self, errors: Dict[str, Exception]) -> None:
        self.errors = errors
        names = ", ".join(errors) or "none"
        super().__init__(f"all providers failed: {names}")

    @property
    def last_error(self) -> str:
        if not self.errors:
            return ""
        return str(list(self.errors.values())[-1])


def run_chain(providers: Sequence[Provider], keyword: str) -> LookupResult:
    """Return the first provider's records; failures fall through to the next provider."""
    errors: Dict[str, Exception] = {}
    for provider in providers:
        try:
            records = provider.fetch(keyword)
        except Exception as exc:  # noqa: BLE001
            logger.warning("Provider %s failed for keyword=%s: %s", provider.name, keyword, exc)
            errors[provider.name] = exc
            continue
        logger.info("Provider %s returned %d records for keyword=%s", provider.name, len(records), keyword)
        return LookupResult(provider=provider.name, records=records)

    logger.error("All providers failed for keyword=%s: %s", keyword, list(errors))
    raise ProvidersExhausted(errors)


def thirdparty_chain() -> List[Provider]:
    return [
        Provider(aggregators.OPENDATA_VIP, aggregators.search_opendata_vip),
        Provider(aggregators.G0V, aggregators.search_g0v),
    ]


def registry_chain() -> List[Provider]:
    return [
        Provider(gcis.PROVIDER, gcis.search),
        Provider(aggregators.FINMIND, aggregators.search_finmind),
    ]


CHAINS: Dict[str, Callable[[], List[Provider]]] = {
    THIRDPARTY: thirdparty_chain,
    REGISTRY: registry_chain,
}


def lookup(source: str, keyword: str) -> LookupResult:
    keyword = keyword.strip()
    if not keyword:
        raise ValueError("keyword must not be empty")
    try:
        build_chain = CHAINS[source]
    except KeyError:
        raise ValueError(f"unknown source: {source}") from None
    return run_chain(build_chain(), keyword)

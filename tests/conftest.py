import sys
from pathlib import Path

import pytest

# Ensure the `twcompany` package is importable when running pytest from the repo root.
ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from twcompany.core import config  # noqa: E402

_ENV_VARS = (
    "PORT",
    "LOG_LEVEL",
    "HTTP_USER_AGENT",
    "GCIS_TIMEOUT",
    "FALLBACK_TIMEOUT",
    "GCIS_TOP",
    "OPENDATA_VIP_URL",
    "G0V_SEARCH_URL",
    "GCIS_BASE_URL",
    "FINMIND_URL",
)


@pytest.fixture(autouse=True)
def clean_settings(monkeypatch):
    for name in _ENV_VARS:
        monkeypatch.delenv(name, raising=False)
    monkeypatch.setattr(config, "load_dotenv", lambda: None)
    config.get_settings.cache_clear()
    yield
    config.get_settings.cache_clear()

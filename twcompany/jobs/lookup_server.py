"""HTTP entrypoint serving the lookup form and the two search endpoints."""

from __future__ import annotations

import logging
import os
from typing import Any, Dict, Optional

from flask import Flask, jsonify, render_template, request

from twcompany.core.config import get_settings
from twcompany.core.lookup import REGISTRY, THIRDPARTY, ProvidersExhausted, lookup

# ---------- Logging ----------
logging.basicConfig(
    level=os.getenv("LOG_LEVEL", "INFO").upper(),
    format="%(asctime)s %(levelname)s %(name)s - %(message)s",
)
logger = logging.getLogger(__name__)

MISSING_KEYWORD_MESSAGE = "請提供查詢關鍵字"
UNEXPECTED_ERROR_MESSAGE = "查詢發生錯誤"
EXHAUSTED_MESSAGES: Dict[str, Dict[str, str]] = {
    THIRDPARTY: {
        "message": "第三方 API 暫時無法使用，請嘗試使用「財政部資料」或稍後再試",
    },
    REGISTRY: {
        "message": "財政部 API 需要申請權限才能使用。建議改用「第三方 API」或聯絡管理員申請 API 權限。",
        "hint": "如需申請，請至 https://data.gcis.nat.gov.tw/ 填寫使用告知書",
    },
}

# ---------- App ----------
app = Flask(__name__)
app.json.ensure_ascii = False

# ---------- Routes ----------


@app.get("/")
def index() -> Any:
    """Single-page lookup form."""
    return render_template("index.html")


@app.get("/healthz")
def healthcheck() -> Any:
    """Lightweight health endpoint; never touches the upstream providers."""
    return (
        jsonify(
            {
                "status": "ok",
                "revision": os.getenv("K_REVISION", "unknown"),
                "region": os.getenv("X_GOOGLE_RUNTIMEREGION", "unknown"),
            }
        ),
        200,
    )


@app.post("/api/search-thirdparty")
def search_thirdparty() -> Any:
    """Search opendata.vip, falling back to the g0v company API."""
    return _handle_search(THIRDPARTY)


@app.post("/api/search-findata")
def search_findata() -> Any:
    """Search the GCIS registry by 統一編號 or name, falling back to the FinMind relay."""
    return _handle_search(REGISTRY)


# ---------- Internals ----------


def _read_keyword(payload: Dict[str, Any]) -> Optional[str]:
    raw = payload.get("keyword")
    if raw is None:
        return None
    keyword = str(raw).strip()
    return keyword or None


def _handle_search(source: str) -> Any:
    try:
        payload = request.get_json(silent=True)
        if not isinstance(payload, dict):
            payload = {}

        keyword = _read_keyword(payload)
        if not keyword:
            return jsonify({"success": False, "message": MISSING_KEYWORD_MESSAGE}), 400

        try:
            result = lookup(source, keyword)
        except ProvidersExhausted as exc:
            body: Dict[str, Any] = {"success": False, **EXHAUSTED_MESSAGES[source], "error": exc.last_error}
            return jsonify(body), 503

        return (
            jsonify(
                {
                    "success": True,
                    "data": [record.to_dict() for record in result.records],
                    "count": result.count,
                }
            ),
            200,
        )
    except Exception as exc:  # noqa: BLE001
        logger.exception("Lookup failed for source=%s: %s", source, exc)
        return jsonify({"success": False, "message": UNEXPECTED_ERROR_MESSAGE, "error": str(exc)}), 500


def main() -> None:
    """Bind on 0.0.0.0 using PORT from the environment (defaults to 8080)."""
    settings = get_settings()
    logging.getLogger().setLevel(settings.log_level)
    logger.info("[BOOT] Binding on 0.0.0.0:%d", settings.port)
    app.run(host="0.0.0.0", port=settings.port)


if __name__ == "__main__":
    main()

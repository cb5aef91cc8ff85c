from __future__ import annotations

import logging

from flask import current_app, request

from ..core.constants import GENERIC_STORE_ERROR
from ..core.exceptions import StoreError

logger = logging.getLogger(__name__)


def json_body() -> dict:
    data = request.get_json(silent=True)
    return data if isinstance(data, dict) else {}


def store_error(exc: StoreError, status: int):
    """Plain-text response for a failed database call."""
    logger.error("Store error on %s %s: %s", request.method, request.path, exc)
    if current_app.config.get("EXPOSE_STORE_ERRORS", False):
        return str(exc), status
    return GENERIC_STORE_ERROR, status

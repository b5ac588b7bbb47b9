"""
API error taxonomy.

Every error leaves the API as ``{"detail": ..., "code": ...}`` plus optional extras:

- validation errors      -> 400, field messages under ``errors``
- authorization errors   -> 401 / 403, the client sends the user to login
- feature-gate errors    -> 402 ``upgrade_required`` with ``feature`` and ``required_tier``
- backend request errors -> 503 with a generic retry message
"""
from __future__ import annotations

import logging
from typing import Any, Dict, Optional

from django.db import DatabaseError
from rest_framework import status
from rest_framework.exceptions import APIException, ValidationError
from rest_framework.views import exception_handler

logger = logging.getLogger(__name__)

GENERIC_RETRY_MESSAGE = "Something went wrong. Please try again."


class FeatureGateError(APIException):
    """The caller's subscription tier does not include the requested feature."""
    status_code = status.HTTP_402_PAYMENT_REQUIRED
    default_detail = "Upgrade your plan to use this feature."
    default_code = "upgrade_required"

    def __init__(self, feature: str, required_tier: str, current_tier: Optional[str] = None):
        self.feature = feature
        self.required_tier = required_tier
        self.current_tier = current_tier
        super().__init__(f"The {feature.replace('_', ' ')} feature requires the {required_tier.title()} plan.")


class BackendRequestError(APIException):
    """A collaborator (database, checkout, LLM) failed; nothing is retried."""
    status_code = status.HTTP_503_SERVICE_UNAVAILABLE
    default_detail = GENERIC_RETRY_MESSAGE
    default_code = "backend_unavailable"


def _extras(exc: Exception) -> Dict[str, Any]:
    if isinstance(exc, FeatureGateError):
        return {
            "feature": exc.feature,
            "required_tier": exc.required_tier,
            "current_tier": exc.current_tier,
        }
    return {}


def api_exception_handler(exc, context):
    if isinstance(exc, DatabaseError):
        view = context.get("view")
        logger.exception("database error in %s", view.__class__.__name__ if view else "unknown view")
        exc = BackendRequestError()

    response = exception_handler(exc, context)
    if response is None:
        return None

    if isinstance(exc, ValidationError):
        errors = response.data
        if isinstance(errors, dict) and "non_field_errors" in errors and len(errors) == 1:
            detail = errors["non_field_errors"][0]
        else:
            detail = "Please correct the highlighted fields."
        response.data = {"detail": str(detail), "code": "invalid", "errors": errors}
        return response

    if isinstance(exc, APIException):
        codes = exc.get_codes()
        code = codes if isinstance(codes, str) else exc.default_code
        data = {"detail": str(exc.detail) if not isinstance(exc.detail, (dict, list)) else exc.detail, "code": code}
        data.update(_extras(exc))
        response.data = data

    return response

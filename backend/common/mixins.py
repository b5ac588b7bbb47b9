# backend/common/mixins.py
from __future__ import annotations

import logging
from typing import Iterable, Optional

from django.core.exceptions import FieldDoesNotExist
from django.db.models import Model, Q
from rest_framework.exceptions import NotAuthenticated
from rest_framework.pagination import PageNumberPagination
from rest_framework.viewsets import ModelViewSet

logger = logging.getLogger(__name__)


# -----------------------------
# Pagination
# -----------------------------
class DefaultPagination(PageNumberPagination):
    page_size = 25
    page_size_query_param = "page_size"
    max_page_size = 200


# -----------------------------
# Base owner-scoped MVSet
# -----------------------------
class OwnerScopedModelViewSet(ModelViewSet):
    """
    Base ViewSet for per-user records (reviews, quotes, favourites, jobs ...):

    - Every request must be authenticated; the authenticated user is the owner key.
    - The queryset is filtered by `<owner_field>=request.user`.
    - On create, the owner is injected server-side; payload owner is ignored.
    - Adds simple "q" search (icontains across `search_fields`) and "order" (comma-separated).

    Override:
      - `owner_field` (default "user")
      - `search_fields` (tuple of field names)
      - `ordering_fields` (tuple of field names allowed for ordering)
      - `default_ordering` (sequence)
    """
    pagination_class = DefaultPagination

    owner_field = "user"

    search_fields: Iterable[str] = tuple()
    ordering_fields: Iterable[str] = tuple()
    default_ordering: Iterable[str] = ("-created_at",)

    # ---- Owner helpers ----
    def get_owner(self):
        user = self.request.user
        if not user or not user.is_authenticated:
            raise NotAuthenticated()
        return user

    # ---- Queryset plumbing ----
    def _model_class(self) -> type[Model]:
        if getattr(self, "queryset", None) is not None:
            return self.queryset.model
        return self.get_serializer_class().Meta.model  # type: ignore[attr-defined]

    def _has_field(self, field_name: str) -> bool:
        try:
            self._model_class()._meta.get_field(field_name)
            return True
        except FieldDoesNotExist:
            return False

    def _apply_owner_filter(self, qs):
        return qs.filter(**{self.owner_field: self.get_owner()})

    def _apply_search(self, qs):
        q = self.request.query_params.get("q")
        if not q:
            return qs
        fields = tuple(self.search_fields) or tuple(
            f for f in ("name", "title", "description", "message") if self._has_field(f)
        )
        if not fields:
            return qs
        cond = Q()
        for f in fields:
            cond |= Q(**{f"{f}__icontains": q})
        return qs.filter(cond)

    def _apply_ordering(self, qs):
        order_param = self.request.query_params.get("order")
        fields_allowed = set(self.ordering_fields or ())
        if order_param:
            items = [s.strip() for s in order_param.split(",") if s.strip()]
            cleaned = []
            for it in items:
                base = it[1:] if it.startswith("-") else it
                if not fields_allowed or base in fields_allowed:
                    cleaned.append(it)
            if cleaned:
                return qs.order_by(*cleaned)
        return qs.order_by(*self.default_ordering) if self.default_ordering else qs

    def base_queryset(self):
        if getattr(self, "queryset", None) is not None:
            return self.queryset.all()
        return self._model_class().objects.all()

    def get_queryset(self):
        qs = self._apply_owner_filter(self.base_queryset())
        qs = self._apply_search(qs)
        return self._apply_ordering(qs)

    def perform_create(self, serializer):
        return serializer.save(**{self.owner_field: self.get_owner()})


# -----------------------------
# Action logging
# -----------------------------
class LoggedActionsMixin:
    """Attach to ViewSets whose writes should leave a trail in the app log."""

    def _log_action(self, action: str, obj, extra: Optional[dict] = None):
        user_id = getattr(self.request.user, "id", None)
        logger.info(
            "%s %s id=%s user=%s path=%s %s",
            action,
            obj.__class__.__name__,
            getattr(obj, "id", ""),
            user_id,
            self.request.path,
            extra or "",
        )

    def perform_create(self, serializer):
        obj = super().perform_create(serializer) or serializer.instance
        self._log_action("create", obj)
        return obj

    def perform_update(self, serializer):
        obj = super().perform_update(serializer) or serializer.instance
        self._log_action("update", obj)
        return obj

    def perform_destroy(self, instance):
        self._log_action("delete", instance)
        return super().perform_destroy(instance)

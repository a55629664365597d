"""Application and per-request contexts for dependency injection."""

from __future__ import annotations

import threading
from dataclasses import dataclass, field
from typing import Any, Optional

from space_trips.adapters.catalog.request_scoped import RequestScopedCatalog
from space_trips.adapters.catalog_factory import build_catalog
from space_trips.adapters.interfaces import LaunchCatalogGateway, UserBookingStore
from space_trips.config.settings import ServiceSettings, load_settings
from space_trips.domain.models import User
from space_trips.infrastructure.logging import StructuredLogger, get_logger
from space_trips.persistence.repository import get_booking_store
from space_trips.security.identity_token import decode_identity_token, token_from_authorization


@dataclass
class AppContext:
    """Process-wide data-source handles."""

    settings: ServiceSettings
    catalog: LaunchCatalogGateway
    store: UserBookingStore


def make_app_context(settings: Optional[ServiceSettings] = None) -> AppContext:
    resolved = settings or load_settings()
    return AppContext(
        settings=resolved,
        catalog=build_catalog(resolved),
        store=get_booking_store(resolved),
    )


_UNRESOLVED: Any = object()


@dataclass
class RequestContext:
    """Everything one operation may touch: data sources plus the caller's identity.

    ``caller_email`` is None for anonymous requests, which act as the demo user.
    The caller is resolved once and reused for every field of the request.
    """

    catalog: RequestScopedCatalog
    store: UserBookingStore
    settings: ServiceSettings
    caller_email: Optional[str] = None
    logger: StructuredLogger = field(default_factory=get_logger)
    _user: Any = field(default=_UNRESOLVED, init=False, repr=False)
    _user_lock: threading.Lock = field(default_factory=threading.Lock, init=False, repr=False)

    @property
    def is_anonymous(self) -> bool:
        return self.caller_email is None

    def current_user(self) -> Optional[User]:
        if self._user is _UNRESOLVED:
            with self._user_lock:
                if self._user is _UNRESOLVED:
                    self._user = self.store.find_or_create_user(self.caller_email)
        return self._user


def make_request_context(
    app_ctx: AppContext,
    *,
    authorization: Optional[str] = None,
    trace_id: Optional[str] = None,
) -> RequestContext:
    token = token_from_authorization(authorization)
    return RequestContext(
        catalog=RequestScopedCatalog(app_ctx.catalog),
        store=app_ctx.store,
        settings=app_ctx.settings,
        caller_email=decode_identity_token(token) if token else None,
        logger=get_logger(trace_id),
    )


__all__ = ["AppContext", "RequestContext", "make_app_context", "make_request_context"]

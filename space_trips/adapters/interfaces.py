"""Data-source protocols consumed by the resolver layer."""

from __future__ import annotations

from collections.abc import Callable, Iterable, Sequence
from typing import Optional, Protocol, runtime_checkable

from space_trips.domain.models import Launch, User


@runtime_checkable
class LaunchCatalogGateway(Protocol):
    """Read-only launch catalog. Failures raise CatalogUnavailableError."""

    source: str

    def get_all(self) -> list[Launch]: ...

    def get_by_id(self, launch_id: str) -> Optional[Launch]: ...

    def get_by_ids(self, launch_ids: Iterable[str]) -> list[Launch]: ...


@runtime_checkable
class UserBookingStore(Protocol):
    """Per-user identity and trip records. Failures raise StoreUnavailableError."""

    backend: str

    def find_or_create_user(self, email: Optional[str] = None) -> Optional[User]: ...

    def get_booked_launch_ids(self, user: User) -> set[str]: ...

    def is_booked(self, user: User, launch_id: str) -> bool: ...

    def book_trips(
        self,
        user: User,
        launch_ids: Sequence[str],
        *,
        bookable: Optional[Callable[[str], bool]] = None,
    ) -> list[str]: ...

    def cancel_trip(self, user: User, launch_id: str) -> bool: ...


__all__ = ["LaunchCatalogGateway", "UserBookingStore"]

"""Domain package exports."""

from space_trips.domain.constants import DEFAULT_PAGE_SIZE, MAX_PAGE_SIZE
from space_trips.domain.enums import PatchSize
from space_trips.domain.exceptions import DomainError, InvalidCursorError
from space_trips.domain.models import Launch, LaunchPage, Mission, Rocket, User
from space_trips.domain.pagination import paginate

__all__ = [
    "DomainError",
    "InvalidCursorError",
    "Launch",
    "LaunchPage",
    "Mission",
    "PatchSize",
    "Rocket",
    "User",
    "paginate",
    "DEFAULT_PAGE_SIZE",
    "MAX_PAGE_SIZE",
]

"""Resolver table for the launch/booking query surface.

Every handler has the shape ``(parent, args, ctx) -> value``. ``parent`` is the
object whose field is being resolved (None for root operations), ``args`` the
parsed field arguments and ``ctx`` the per-request context. The GraphQL schema
and the CLI both dispatch through ``resolve``.
"""

from __future__ import annotations

from collections.abc import Callable, Mapping, Sequence
from concurrent.futures import ThreadPoolExecutor
from typing import Any, Optional

from space_trips.application.context import RequestContext
from space_trips.application.contracts import TripUpdateResponse
from space_trips.domain.constants import (
    MSG_CANCEL_FAILED,
    MSG_TRIP_CANCELLED,
    MSG_TRIPS_BOOKED,
    MSG_TRIPS_PARTIAL,
)
from space_trips.domain.enums import PatchSize
from space_trips.domain.models import Launch, LaunchPage, Mission, User
from space_trips.domain.pagination import normalize_page_size, paginate
from space_trips.security.identity_token import encode_identity_token
from space_trips.shared.exceptions import UnknownOperationError

Resolver = Callable[[Any, Mapping[str, Any], RequestContext], Any]


# ── Query ─────────────────────────────────────────────

def resolve_launches(_parent: Any, args: Mapping[str, Any], ctx: RequestContext) -> LaunchPage:
    all_launches = ctx.catalog.get_all()
    # Catalog order is oldest first; clients page from the most recent launch.
    all_launches.reverse()
    page_size = normalize_page_size(
        args.get("page_size"),
        default=ctx.settings.default_page_size,
        maximum=ctx.settings.max_page_size,
    )
    return paginate(
        all_launches,
        after=args.get("after"),
        page_size=page_size,
        max_page_size=ctx.settings.max_page_size,
    )


def resolve_launch(_parent: Any, args: Mapping[str, Any], ctx: RequestContext) -> Optional[Launch]:
    return ctx.catalog.get_by_id(str(args["id"]))


def resolve_me(_parent: Any, _args: Mapping[str, Any], ctx: RequestContext) -> Optional[User]:
    return ctx.current_user()


# ── Mutation ──────────────────────────────────────────

def resolve_login(_parent: Any, args: Mapping[str, Any], ctx: RequestContext) -> Optional[str]:
    """Return an identity token for ``email``; None means the login failed.

    The token is a reversible encoding of the email, not a credential.
    """
    email = args.get("email")
    if not email:
        return None
    user = ctx.store.find_or_create_user(email)
    if user is None:
        return None
    return encode_identity_token(user.email)


def _partial_booking_message(requested: Sequence[str], booked: Sequence[str]) -> str:
    booked_set = set(booked)
    missing = [launch_id for launch_id in requested if launch_id not in booked_set]
    return MSG_TRIPS_PARTIAL.format(ids=",".join(missing))


def resolve_book_trips(_parent: Any, args: Mapping[str, Any], ctx: RequestContext) -> TripUpdateResponse:
    launch_ids = [str(i) for i in args.get("launch_ids") or []]
    user = ctx.current_user()
    booked: list[str] = []
    if user is not None:
        booked = ctx.store.book_trips(user, launch_ids, bookable=ctx.catalog.has_launch)

    # The store write is not rolled back if this fetch fails.
    launches = ctx.catalog.get_by_ids(launch_ids)

    success = len(booked) == len(launch_ids)
    if not success:
        ctx.logger.warning("Mutation.bookTrips", "partial booking", requested=len(launch_ids), booked=len(booked))
    return TripUpdateResponse(
        success=success,
        message=MSG_TRIPS_BOOKED if success else _partial_booking_message(launch_ids, booked),
        launches=launches,
    )


def resolve_cancel_trip(_parent: Any, args: Mapping[str, Any], ctx: RequestContext) -> TripUpdateResponse:
    launch_id = str(args["launch_id"])
    user = ctx.current_user()
    if user is None or not ctx.store.cancel_trip(user, launch_id):
        return TripUpdateResponse(success=False, message=MSG_CANCEL_FAILED, launches=[])

    launch = ctx.catalog.get_by_id(launch_id)
    return TripUpdateResponse(
        success=True,
        message=MSG_TRIP_CANCELLED,
        launches=[launch] if launch is not None else [],
    )


# ── Fields ────────────────────────────────────────────

def resolve_launch_is_booked(launch: Launch, _args: Mapping[str, Any], ctx: RequestContext) -> bool:
    user = ctx.current_user()
    if user is None:
        return False
    return ctx.store.is_booked(user, launch.id)


def resolve_mission_patch(mission: Mission, args: Mapping[str, Any], _ctx: RequestContext) -> Optional[str]:
    return mission.patch(args.get("size") or PatchSize.LARGE)


def resolve_user_trips(user: Optional[User], _args: Mapping[str, Any], ctx: RequestContext) -> list[Launch]:
    owner = user if user is not None else ctx.current_user()
    if owner is None:
        return []
    launch_ids = ctx.store.get_booked_launch_ids(owner)
    if not launch_ids:
        return []
    return ctx.catalog.get_by_ids(sorted(launch_ids, key=lambda i: (len(i), i)))


def decorate_is_booked(launches: Sequence[Launch], ctx: RequestContext) -> list[bool]:
    """Evaluate ``isBooked`` for every launch on a bounded pool; results follow input order."""
    if not launches:
        return []
    # Resolve the caller before fanning out so every item sees the same user.
    ctx.current_user()
    workers = max(1, min(ctx.settings.fanout_max_workers, len(launches)))
    with ThreadPoolExecutor(max_workers=workers, thread_name_prefix="is-booked") as pool:
        return list(pool.map(lambda launch: resolve_launch_is_booked(launch, {}, ctx), launches))


RESOLVERS: dict[str, Resolver] = {
    "Query.launches": resolve_launches,
    "Query.launch": resolve_launch,
    "Query.me": resolve_me,
    "Mutation.login": resolve_login,
    "Mutation.bookTrips": resolve_book_trips,
    "Mutation.cancelTrip": resolve_cancel_trip,
    "Launch.isBooked": resolve_launch_is_booked,
    "Mission.missionPatch": resolve_mission_patch,
    "User.trips": resolve_user_trips,
}

_ROOT_PREFIXES = ("Query.", "Mutation.")


def resolve(name: str, parent: Any, args: Mapping[str, Any], ctx: RequestContext) -> Any:
    """Dispatch ``name`` to its handler. Root operations are logged with their duration."""
    handler = RESOLVERS.get(name)
    if handler is None:
        raise UnknownOperationError(name)
    if not name.startswith(_ROOT_PREFIXES):
        return handler(parent, args, ctx)

    with ctx.logger.timed(name):
        return handler(parent, args, ctx)


__all__ = ["RESOLVERS", "Resolver", "decorate_is_booked", "resolve"]

"""space-trips CLI: browse launches and manage bookings from a terminal.

Every command prints one JSON document on stdout. Identity comes from
``--token`` (see ``login``); without it the demo user is used.
"""

from __future__ import annotations

import argparse
import json
import sys
from typing import Any, Optional, Sequence

from dotenv import load_dotenv

from space_trips.application.context import AppContext, RequestContext, make_app_context, make_request_context
from space_trips.application.resolvers import decorate_is_booked, resolve
from space_trips.domain.exceptions import DomainError
from space_trips.domain.models import Launch
from space_trips.shared.exceptions import ExternalServiceError

EXIT_OK = 0
EXIT_BAD_INPUT = 1
EXIT_UNAVAILABLE = 2


def _launch_rows(launches: list[Launch], ctx: RequestContext) -> list[dict[str, Any]]:
    booked = decorate_is_booked(launches, ctx)
    rows: list[dict[str, Any]] = []
    for launch, is_booked in zip(launches, booked):
        row = launch.model_dump(mode="json")
        row["is_booked"] = is_booked
        rows.append(row)
    return rows


def _cmd_launches(args: argparse.Namespace, ctx: RequestContext) -> dict[str, Any]:
    page = resolve("Query.launches", None, {"page_size": args.page_size, "after": args.after}, ctx)
    return {
        "cursor": page.cursor,
        "has_more": page.has_more,
        "launches": _launch_rows(page.launches, ctx),
    }


def _cmd_launch(args: argparse.Namespace, ctx: RequestContext) -> dict[str, Any]:
    launch = resolve("Query.launch", None, {"id": args.id}, ctx)
    if launch is None:
        return {"launch": None}
    return {"launch": _launch_rows([launch], ctx)[0]}


def _cmd_login(args: argparse.Namespace, ctx: RequestContext) -> dict[str, Any]:
    return {"token": resolve("Mutation.login", None, {"email": args.email}, ctx)}


def _cmd_book(args: argparse.Namespace, ctx: RequestContext) -> dict[str, Any]:
    result = resolve("Mutation.bookTrips", None, {"launch_ids": args.ids}, ctx)
    return result.model_dump(mode="json")


def _cmd_cancel(args: argparse.Namespace, ctx: RequestContext) -> dict[str, Any]:
    result = resolve("Mutation.cancelTrip", None, {"launch_id": args.id}, ctx)
    return result.model_dump(mode="json")


def _cmd_trips(_args: argparse.Namespace, ctx: RequestContext) -> dict[str, Any]:
    user = resolve("Query.me", None, {}, ctx)
    if user is None:
        return {"user": None, "trips": []}
    trips = resolve("User.trips", user, {}, ctx)
    return {"user": user.model_dump(mode="json", exclude_none=True), "trips": _launch_rows(trips, ctx)}


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="space-trips", description="Browse launches and book trips")
    parser.add_argument("--token", default=None, help="identity token returned by `login`")
    sub = parser.add_subparsers(dest="command", required=True)

    p = sub.add_parser("launches", help="list launches, most recent first")
    p.add_argument("--page-size", type=int, default=None)
    p.add_argument("--after", default=None, help="cursor returned by the previous page")
    p.set_defaults(handler=_cmd_launches)

    p = sub.add_parser("launch", help="show one launch")
    p.add_argument("id")
    p.set_defaults(handler=_cmd_launch)

    p = sub.add_parser("login", help="print an identity token for EMAIL")
    p.add_argument("email")
    p.set_defaults(handler=_cmd_login)

    p = sub.add_parser("book", help="book trips on one or more launches")
    p.add_argument("ids", nargs="+")
    p.set_defaults(handler=_cmd_book)

    p = sub.add_parser("cancel", help="cancel a booked trip")
    p.add_argument("id")
    p.set_defaults(handler=_cmd_cancel)

    p = sub.add_parser("trips", help="list the caller's booked launches")
    p.set_defaults(handler=_cmd_trips)
    return parser


def main(argv: Optional[Sequence[str]] = None, *, app_ctx: Optional[AppContext] = None) -> int:
    load_dotenv()
    args = build_parser().parse_args(argv)
    ctx = make_request_context(app_ctx or make_app_context(), authorization=args.token)

    try:
        payload = args.handler(args, ctx)
    except DomainError as exc:
        print(json.dumps({"error": str(exc), "code": "BAD_USER_INPUT"}, ensure_ascii=False))
        return EXIT_BAD_INPUT
    except ExternalServiceError as exc:
        print(json.dumps({"error": str(exc), "code": "SERVICE_UNAVAILABLE"}, ensure_ascii=False))
        return EXIT_UNAVAILABLE

    print(json.dumps(payload, ensure_ascii=False, indent=2))
    return EXIT_OK


if __name__ == "__main__":
    sys.exit(main())

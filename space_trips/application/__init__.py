"""Application layer: request contexts and the resolver table."""

from space_trips.application.context import AppContext, RequestContext, make_app_context, make_request_context
from space_trips.application.contracts import TripUpdateResponse
from space_trips.application.resolvers import RESOLVERS, decorate_is_booked, resolve

__all__ = [
    "AppContext",
    "RESOLVERS",
    "RequestContext",
    "TripUpdateResponse",
    "decorate_is_booked",
    "make_app_context",
    "make_request_context",
    "resolve",
]

"""Domain constants shared by the coordinator and the outer surfaces."""

DEFAULT_PAGE_SIZE = 20
# Upper bound on a single page; larger requests are clamped.
MAX_PAGE_SIZE = 100

DEFAULT_DEMO_EMAIL = "demo@space-trips.local"

MSG_TRIPS_BOOKED = "trips booked successfully"
MSG_TRIPS_PARTIAL = "the following launches couldn't be booked: {ids}"
MSG_TRIP_CANCELLED = "trip cancelled"
MSG_CANCEL_FAILED = "failed to cancel trip"

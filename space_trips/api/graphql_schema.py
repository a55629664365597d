"""GraphQL schema.

Each field delegates to the resolver table; sync data-source calls run in a
worker thread, bounded per request by the ``fanout`` semaphore in the context.
"""

import asyncio
from collections.abc import Iterator
from enum import Enum
from typing import Any, Mapping, Optional

import strawberry
from graphql import GraphQLError
from strawberry.extensions import SchemaExtension
from strawberry.types import Info

from space_trips.application.context import RequestContext
from space_trips.application.contracts import TripUpdateResponse
from space_trips.application.resolvers import resolve
from space_trips.domain.exceptions import InvalidCursorError
from space_trips.domain.models import Launch, LaunchPage, Mission, User
from space_trips.shared.exceptions import ExternalServiceError


def _request_ctx(info: Info) -> RequestContext:
    return info.context["request_ctx"]


async def _resolve(info: Info, name: str, parent: Any, args: Mapping[str, Any]) -> Any:
    async with info.context["fanout"]:
        return await asyncio.to_thread(resolve, name, parent, args, _request_ctx(info))


@strawberry.enum(name="PatchSize")
class PatchSizeEnum(Enum):
    SMALL = "SMALL"
    LARGE = "LARGE"


@strawberry.type(name="Rocket")
class RocketType:
    id: strawberry.ID
    name: Optional[str]
    type: Optional[str]


@strawberry.type(name="Mission")
class MissionType:
    name: Optional[str]
    model: strawberry.Private[Mission]

    @strawberry.field
    def mission_patch(self, info: Info, size: Optional[PatchSizeEnum] = PatchSizeEnum.LARGE) -> Optional[str]:
        args = {"size": size.value if size is not None else None}
        return resolve("Mission.missionPatch", self.model, args, _request_ctx(info))


@strawberry.type(name="Launch")
class LaunchType:
    id: strawberry.ID
    site: Optional[str]
    mission: Optional[MissionType]
    rocket: Optional[RocketType]
    model: strawberry.Private[Launch]

    @strawberry.field
    async def is_booked(self, info: Info) -> bool:
        return await _resolve(info, "Launch.isBooked", self.model, {})

    @classmethod
    def from_domain(cls, launch: Launch) -> "LaunchType":
        mission = None
        if launch.mission is not None:
            mission = MissionType(name=launch.mission.name, model=launch.mission)
        rocket = None
        if launch.rocket is not None:
            rocket = RocketType(
                id=strawberry.ID(launch.rocket.id),
                name=launch.rocket.name,
                type=launch.rocket.type,
            )
        return cls(
            id=strawberry.ID(launch.id),
            site=launch.site,
            mission=mission,
            rocket=rocket,
            model=launch,
        )


def _launch_list(launches: list[Launch]) -> list[LaunchType]:
    return [LaunchType.from_domain(launch) for launch in launches]


@strawberry.type(name="User")
class UserType:
    id: strawberry.ID
    email: str
    model: strawberry.Private[User]

    @strawberry.field
    async def trips(self, info: Info) -> list[LaunchType]:
        launches = await _resolve(info, "User.trips", self.model, {})
        return _launch_list(launches)


@strawberry.type(name="LaunchConnection")
class LaunchConnectionType:
    cursor: Optional[str]
    has_more: bool
    launches: list[LaunchType]

    @classmethod
    def from_domain(cls, page: LaunchPage) -> "LaunchConnectionType":
        return cls(cursor=page.cursor, has_more=page.has_more, launches=_launch_list(page.launches))


@strawberry.type(name="TripUpdateResponse")
class TripUpdateResponseType:
    success: bool
    message: Optional[str]
    launches: list[LaunchType]

    @classmethod
    def from_contract(cls, result: TripUpdateResponse) -> "TripUpdateResponseType":
        return cls(success=result.success, message=result.message, launches=_launch_list(result.launches))


@strawberry.type
class Query:
    @strawberry.field
    async def launches(
        self,
        info: Info,
        page_size: Optional[int] = None,
        after: Optional[str] = None,
    ) -> LaunchConnectionType:
        page = await _resolve(info, "Query.launches", None, {"page_size": page_size, "after": after})
        return LaunchConnectionType.from_domain(page)

    @strawberry.field
    async def launch(self, info: Info, id: strawberry.ID) -> Optional[LaunchType]:
        launch = await _resolve(info, "Query.launch", None, {"id": str(id)})
        return LaunchType.from_domain(launch) if launch is not None else None

    @strawberry.field
    async def me(self, info: Info) -> Optional[UserType]:
        user = await _resolve(info, "Query.me", None, {})
        if user is None:
            return None
        return UserType(id=strawberry.ID(user.id), email=user.email, model=user)


@strawberry.type
class Mutation:
    @strawberry.mutation
    async def book_trips(self, info: Info, launch_ids: list[strawberry.ID]) -> TripUpdateResponseType:
        result = await _resolve(info, "Mutation.bookTrips", None, {"launch_ids": [str(i) for i in launch_ids]})
        return TripUpdateResponseType.from_contract(result)

    @strawberry.mutation
    async def cancel_trip(self, info: Info, launch_id: strawberry.ID) -> TripUpdateResponseType:
        result = await _resolve(info, "Mutation.cancelTrip", None, {"launch_id": str(launch_id)})
        return TripUpdateResponseType.from_contract(result)

    @strawberry.mutation
    async def login(self, info: Info, email: str) -> Optional[str]:
        return await _resolve(info, "Mutation.login", None, {"email": email})


def error_code(error: BaseException | None) -> Optional[str]:
    if isinstance(error, InvalidCursorError):
        return "BAD_USER_INPUT"
    if isinstance(error, ExternalServiceError):
        return "SERVICE_UNAVAILABLE"
    return None


class ErrorCodeExtension(SchemaExtension):
    """Tags errors with ``extensions.code`` so callers can tell bad input from upstream failure."""

    def on_operation(self) -> Iterator[None]:
        yield
        result = self.execution_context.result
        errors = getattr(result, "errors", None)
        if not errors:
            return
        result.errors = [self._with_code(error) for error in errors]

    @staticmethod
    def _with_code(error: GraphQLError) -> GraphQLError:
        code = error_code(error.original_error)
        if code is None:
            return error
        return GraphQLError(
            error.message,
            nodes=error.nodes,
            source=error.source,
            positions=error.positions,
            path=error.path,
            original_error=error.original_error,
            extensions={**(error.extensions or {}), "code": code},
        )


schema = strawberry.Schema(query=Query, mutation=Mutation, extensions=[ErrorCodeExtension])


__all__ = ["ErrorCodeExtension", "error_code", "schema"]

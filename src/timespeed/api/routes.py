"""HTTP routes for the time-flow API."""

from __future__ import annotations

from dataclasses import asdict
from typing import Annotated

from fastapi import APIRouter, Depends, HTTPException, Query, Request, Response, status
from pydantic import BaseModel, Field

from timespeed import __version__
from timespeed.api.runtime import (
    ApiState,
    ControlAction,
    PlayerSession,
    SessionLimitError,
    SessionNotFoundError,
)
from timespeed.domain.enums import (
    AutoFreezeCause,
    IntervalStep,
    LocationType,
    ManualOverride,
    Season,
)
from timespeed.domain.models import DAY_END_TIME, DAY_START_TIME, Location

router = APIRouter()


def get_state(request: Request) -> ApiState:
    state = getattr(request.app.state, "api_state", None)
    if state is None:  # pragma: no cover - FastAPI should always initialise state
        raise RuntimeError("API state not initialised")
    return state


ApiStateDep = Annotated[ApiState, Depends(get_state)]


class LocationModel(BaseModel):
    name: str = Field(min_length=1)
    location_type: LocationType = LocationType.OUTDOORS
    extra_ms_per_minute: int = 0

    def to_domain(self) -> Location:
        return Location(
            name=self.name,
            location_type=self.location_type,
            extra_ms_per_minute=self.extra_ms_per_minute,
        )


class CreateSessionRequest(BaseModel):
    location: LocationModel
    season: Season = Season.SPRING
    day_of_month: int = Field(default=1, ge=1, le=28)
    main_player: bool = True


class SessionState(BaseModel):
    id: int
    frozen: bool
    manual_override: ManualOverride
    auto_cause: AutoFreezeCause
    target_interval: int
    rescale_enabled: bool
    elapsed: int
    time_of_day: int
    season: Season
    day_of_month: int
    location: str | None
    main_player: bool
    ticks_elapsed: int
    updates: int


class DayStartedRequest(BaseModel):
    season: Season
    day_of_month: int = Field(ge=1, le=28)


class WarpRequest(BaseModel):
    location: LocationModel
    local_player: bool = True


class TimeChangedRequest(BaseModel):
    time_of_day: int = Field(ge=DAY_START_TIME, le=DAY_END_TIME)


class ClockAdvanceRequest(BaseModel):
    milliseconds: int = Field(default=16, ge=0, le=60_000)
    updates: int = Field(default=1, ge=1, le=10_000)


class NotificationPayload(BaseModel):
    message: str
    duration_ms: int


def _session_or_404(state: ApiState, session_id: int) -> PlayerSession:
    try:
        return state.sessions.get(session_id)
    except SessionNotFoundError as exc:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND, detail="session not found"
        ) from exc


def _state_of(session: PlayerSession) -> SessionState:
    return SessionState.model_validate(session.to_dict())


def _invalid_config(exc: ValueError) -> HTTPException:
    return HTTPException(
        status_code=status.HTTP_400_BAD_REQUEST, detail=f"invalid time config: {exc}"
    )


@router.get("/health")
async def health(state: ApiStateDep) -> dict[str, object]:
    return {"status": "ok", "version": __version__, "sessions": len(state.sessions)}


@router.get("/config")
async def get_config(state: ApiStateDep) -> dict[str, object]:
    try:
        config = state.repository.load()
    except ValueError as exc:
        raise _invalid_config(exc) from exc
    return asdict(config)


@router.get("/sessions", response_model=list[SessionState])
async def list_sessions(state: ApiStateDep) -> list[SessionState]:
    return [_state_of(session) for session in state.sessions.list_sessions()]


@router.post("/sessions", response_model=SessionState, status_code=status.HTTP_201_CREATED)
async def create_session(request: CreateSessionRequest, state: ApiStateDep) -> SessionState:
    try:
        session = state.sessions.create(
            location=request.location.to_domain(),
            season=request.season,
            day_of_month=request.day_of_month,
            main_player=request.main_player,
        )
    except SessionLimitError as exc:
        raise HTTPException(status_code=status.HTTP_409_CONFLICT, detail=str(exc)) from exc
    except ValueError as exc:
        raise _invalid_config(exc) from exc
    return _state_of(session)


@router.get("/sessions/{session_id}", response_model=SessionState)
async def get_session(session_id: int, state: ApiStateDep) -> SessionState:
    return _state_of(_session_or_404(state, session_id))


@router.delete("/sessions/{session_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_session(session_id: int, state: ApiStateDep) -> Response:
    try:
        state.sessions.remove(session_id)
    except SessionNotFoundError as exc:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND, detail="session not found"
        ) from exc
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.post("/sessions/{session_id}/events/day-started", response_model=SessionState)
async def day_started(
    session_id: int, request: DayStartedRequest, state: ApiStateDep
) -> SessionState:
    session = _session_or_404(state, session_id)
    session.start_day(request.season, request.day_of_month)
    return _state_of(session)


@router.post("/sessions/{session_id}/events/warped", response_model=SessionState)
async def warped(session_id: int, request: WarpRequest, state: ApiStateDep) -> SessionState:
    session = _session_or_404(state, session_id)
    session.warp(request.location.to_domain(), local_player=request.local_player)
    return _state_of(session)


@router.post("/sessions/{session_id}/events/time-changed", response_model=SessionState)
async def time_changed(
    session_id: int, request: TimeChangedRequest, state: ApiStateDep
) -> SessionState:
    session = _session_or_404(state, session_id)
    session.clock.time_of_day = request.time_of_day
    session.controller.change_time(request.time_of_day)
    return _state_of(session)


@router.post("/sessions/{session_id}/clock/advance", response_model=SessionState)
async def advance_clock(
    session_id: int, request: ClockAdvanceRequest, state: ApiStateDep
) -> SessionState:
    session = _session_or_404(state, session_id)
    session.advance(request.milliseconds, request.updates)
    return _state_of(session)


@router.post("/sessions/{session_id}/actions/{action}", response_model=SessionState)
async def perform_action(
    session_id: int,
    action: ControlAction,
    state: ApiStateDep,
    step: Annotated[IntervalStep, Query()] = IntervalStep.NORMAL,
) -> SessionState:
    session = _session_or_404(state, session_id)
    session.perform(action, step)
    return _state_of(session)


@router.post("/sessions/{session_id}/config/reload", response_model=SessionState)
async def reload_config(session_id: int, state: ApiStateDep) -> SessionState:
    session = _session_or_404(state, session_id)
    try:
        state.sessions.reload_config(session_id)
    except ValueError as exc:
        raise _invalid_config(exc) from exc
    return _state_of(session)


@router.get("/sessions/{session_id}/notifications", response_model=list[NotificationPayload])
async def drain_notifications(session_id: int, state: ApiStateDep) -> list[NotificationPayload]:
    session = _session_or_404(state, session_id)
    return [
        NotificationPayload(message=item.message, duration_ms=item.duration_ms)
        for item in session.notifier.drain()
    ]

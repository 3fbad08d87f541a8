"""Append-only registry event log.

GET /v1/events?after=N&limit=M returns events with sequence > N in
sequence order.  Observers poll with the last sequence they saw; the
Redis stream (when configured) carries the same events live.
"""

from __future__ import annotations

from typing import Annotated, Any

from fastapi import APIRouter, Query
from pydantic import BaseModel

from app.services.registry import holdings_service

router = APIRouter(prefix="/v1/events", tags=["events"])


class EventOut(BaseModel):
    sequence: int
    type: str
    occurred_at: int
    payload: dict[str, Any]


@router.get("", response_model=list[EventOut])
async def list_events(
    after: Annotated[int, Query(ge=0)] = 0,
    limit: Annotated[int, Query(ge=1, le=500)] = 100,
) -> list[EventOut]:
    events = await holdings_service.list_events(after=after, limit=limit)
    return [
        EventOut(
            sequence=e.sequence or 0,
            type=str(e.type),
            occurred_at=e.occurred_at,
            payload=e.payload,
        )
        for e in events
    ]

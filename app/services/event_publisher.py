"""Fan-out of committed registry events to external observers.

The event log inside the unit of work is the durable record; it is
written in the same transaction as the change it describes.  After the
transaction commits, the service hands the event to a publisher:

  RedisEventPublisher     XADD onto the ``registry:events`` stream.
                          Consumers read with XREAD / consumer groups.
  InMemoryEventPublisher  keeps a list, for dev and tests.

A publish failure never undoes a committed change.  Observers that miss
a live notification catch up from GET /v1/events.
"""

from __future__ import annotations

import json
import logging
from collections import deque
from typing import Protocol, runtime_checkable

from app.core.metrics import EVENT_PUBLISH_FAILURES
from app.db.redis import redis_pool
from app.models.events import RegistryEvent

logger = logging.getLogger(__name__)

STREAM_KEY = "registry:events"


@runtime_checkable
class EventPublisher(Protocol):
    async def publish(self, event: RegistryEvent) -> None: ...


class InMemoryEventPublisher:
    """Keeps the most recent events only; the event log holds the rest."""

    _MAXLEN = 1_000

    def __init__(self, maxlen: int = _MAXLEN) -> None:
        self._published: deque[RegistryEvent] = deque(maxlen=maxlen)

    async def publish(self, event: RegistryEvent) -> None:
        self._published.append(event)

    @property
    def published(self) -> list[RegistryEvent]:
        return list(self._published)


class RedisEventPublisher:
    # Cap the stream; the event log stays the long-term record.
    _MAXLEN = 100_000

    def __init__(self, redis_client) -> None:
        self._redis = redis_client

    async def publish(self, event: RegistryEvent) -> None:
        await self._redis.xadd(
            STREAM_KEY,
            {
                "sequence": str(event.sequence),
                "type": str(event.type),
                "occurred_at": str(event.occurred_at),
                "payload": json.dumps(event.payload, sort_keys=True),
            },
            maxlen=self._MAXLEN,
            approximate=True,
        )


async def publish_committed(publisher: EventPublisher, event: RegistryEvent) -> None:
    """Publish an already-committed event; log and count failures."""
    try:
        await publisher.publish(event)
    except Exception:
        EVENT_PUBLISH_FAILURES.labels(event_type=str(event.type)).inc()
        logger.exception(
            "Publishing event seq=%s type=%s failed; event log still holds it",
            event.sequence,
            event.type,
        )


# ---------------------------------------------------------------------------
# Module-level singleton
# ---------------------------------------------------------------------------

if redis_pool is not None:
    event_publisher: EventPublisher = RedisEventPublisher(redis_pool)
else:
    event_publisher = InMemoryEventPublisher()

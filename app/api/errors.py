"""Translate registry domain errors into HTTP responses.

Endpoints call these from an ``except`` clause; services stay unaware of
HTTP.  RecordAlreadyExistsError is deliberately absent: a write-once
breach is an internal fault and surfaces as a 500.
"""

from __future__ import annotations

import logging

from fastapi import HTTPException, status

from app.services.errors import (
    InvalidIssuerError,
    InvalidSubjectError,
    RecordNotFoundError,
    UnauthorizedError,
)

logger = logging.getLogger(__name__)

HANDLED_ERRORS = (
    UnauthorizedError,
    InvalidSubjectError,
    InvalidIssuerError,
    RecordNotFoundError,
)


def http_error(
    exc: UnauthorizedError | InvalidSubjectError | InvalidIssuerError | RecordNotFoundError,
) -> HTTPException:
    if isinstance(exc, UnauthorizedError):
        return HTTPException(
            status_code=status.HTTP_403_FORBIDDEN,
            detail=f"Caller is not {exc.required}",
        )
    if isinstance(exc, RecordNotFoundError):
        return HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(exc))

    logger.warning("Invalid registry request: %s", exc)
    return HTTPException(
        status_code=status.HTTP_422_UNPROCESSABLE_CONTENT,
        detail=str(exc),
    )

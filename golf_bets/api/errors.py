from __future__ import annotations

from typing import Any

from fastapi import HTTPException, status

from golf_bets.domain import DomainValidationError
from golf_bets.service import RoundLocked, RoundNotFound


def api_error(
    *,
    code: str,
    message: str,
    details: Any | None = None,
    status_code: int = status.HTTP_400_BAD_REQUEST,
) -> HTTPException:
    return HTTPException(
        status_code=status_code,
        detail={
            "code": code,
            "message": message,
            "details": details,
        },
    )


def domain_error(exc: Exception) -> HTTPException:
    if isinstance(exc, RoundNotFound):
        return api_error(
            code="round_not_found",
            message=str(exc),
            details={"id": exc.round_id},
            status_code=status.HTTP_404_NOT_FOUND,
        )
    if isinstance(exc, RoundLocked):
        return api_error(
            code="round_locked",
            message=str(exc),
            details={"id": exc.round_id},
            status_code=status.HTTP_409_CONFLICT,
        )
    if isinstance(exc, DomainValidationError):
        return api_error(code="invalid_round", message=str(exc))
    return api_error(
        code="internal_error",
        message="unexpected error",
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
    )

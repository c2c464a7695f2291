from __future__ import annotations

from typing import Any

from fastapi import HTTPException, status


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


def settlement_not_found(settlement_id: int) -> HTTPException:
    return api_error(
        code="settlement_not_found",
        message=f"Settlement {settlement_id} not found",
        details={"id": settlement_id},
        status_code=status.HTTP_404_NOT_FOUND,
    )

"""ServiceResult and ServiceError — what boundary lookups hand back.

INVARIANT: service methods never raise for bad input or range failures;
the failure is carried in ``error`` with the domain error's code.
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, Field

from calbound.domain.errors import BoundaryError


class ServiceError(BaseModel):
    """Machine-readable failure: ``OUT_OF_RANGE``, ``INVALID_TIME_ZONE``, ``INVALID_SELECTION``."""

    model_config = {"frozen": True}

    code: str
    message: str
    detail: dict[str, Any] = Field(default_factory=dict)

    @classmethod
    def from_boundary_error(cls, exc: BoundaryError) -> ServiceError:
        return cls(code=exc.code, message=exc.message, detail=exc.details)


class ServiceResult(BaseModel):
    """Outcome of one lookup.

    ``data`` holds the computed datetimes (``boundary``, or ``start`` and
    ``end``); ``meta`` echoes the selection and the zone name that was used.
    """

    model_config = {"frozen": True}

    ok: bool
    op: str
    data: dict[str, Any] = Field(default_factory=dict)
    error: ServiceError | None = None
    meta: dict[str, Any] | None = None

    @classmethod
    def success(cls, op: str, data: dict[str, Any], **meta: Any) -> ServiceResult:
        return cls(ok=True, op=op, data=data, meta=meta)

    @classmethod
    def failure(cls, op: str, error: ServiceError) -> ServiceResult:
        return cls(ok=False, op=op, error=error)

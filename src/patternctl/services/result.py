"""What every pattern service hands back to the CLI.

A demo either ran (``ok=True`` with its observations in ``data``) or was
asked for something that does not exist (``ok=False`` with an ``error``).
Bad names typed by a user never surface as exceptions.
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, Field


class ServiceError(BaseModel):
    """Why a demo could not run: a stable ``code`` plus a readable message."""

    model_config = {"frozen": True}

    code: str
    message: str
    detail: dict[str, Any] = Field(default_factory=dict)


class ServiceResult(BaseModel):
    """Outcome of one demo run.

    Attributes:
        ok: False only when the request named an unknown kind.
        op: Demo that ran, e.g. ``"support_dispatch"``; selects the renderer.
        data: Observations, such as the class produced or the desk that answered.
        warnings: Caveats worth showing, such as an unhandled support request.
        error: Set exactly when ``ok`` is False.
    """

    model_config = {"frozen": True}

    ok: bool
    op: str
    data: dict[str, Any] = Field(default_factory=dict)
    warnings: list[str] = Field(default_factory=list)
    error: ServiceError | None = None

    @classmethod
    def failure(cls, op: str, code: str, message: str, **detail: Any) -> ServiceResult:
        return cls(ok=False, op=op, error=ServiceError(code=code, message=message, detail=detail))

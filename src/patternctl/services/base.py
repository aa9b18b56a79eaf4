"""BaseService: shared foundation for the pattern services.

Every service receives the frozen :class:`PatternSettings` at
construction time and reads its defaults from there.
"""

from __future__ import annotations

from enum import StrEnum
from typing import TYPE_CHECKING

from patternctl.services.result import ServiceResult

if TYPE_CHECKING:
    from patternctl.config.settings import PatternSettings


class BaseService:
    """Base for all service-layer classes."""

    def __init__(self, settings: PatternSettings) -> None:
        self._settings = settings

    @staticmethod
    def _unknown_kind(op: str, value: str, choices: type[StrEnum]) -> ServiceResult:
        """Error result for a name that is not a member of *choices*."""
        allowed = [member.value for member in choices]
        return ServiceResult.failure(
            op,
            "UNKNOWN_KIND",
            f"Unknown {choices.__name__} {value!r}",
            value=value,
            allowed=allowed,
        )

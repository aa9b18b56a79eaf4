"""Pydantic configuration models with code-baked defaults.

Sparse TOML contract: defaults baked here, patternctl.toml only contains
overrides.  An empty or missing file is a valid configuration.
"""

from __future__ import annotations

from pydantic import BaseModel, Field, field_validator

from patternctl.domain.types import DocumentType, OSType, SupportDesk


class FactoryConfig(BaseModel):
    """[factory] section: kinds used when a command omits its argument."""

    model_config = {"frozen": True}

    document: DocumentType = DocumentType.REPORT
    os: OSType = OSType.WINDOWS


class ChainConfig(BaseModel):
    """[chain] section: desk order of the support chain.

    The terminal desk is appended automatically and is rejected if listed.
    """

    model_config = {"frozen": True}

    desks: list[SupportDesk] = Field(
        default_factory=lambda: [
            SupportDesk.BILLING,
            SupportDesk.PRODUCT,
            SupportDesk.TECHNICAL,
            SupportDesk.GENERAL,
        ]
    )

    @field_validator("desks")
    @classmethod
    def _no_terminal_desk(cls, desks: list[SupportDesk]) -> list[SupportDesk]:
        if SupportDesk.NONE in desks:
            msg = "the terminal desk 'none' is appended automatically"
            raise ValueError(msg)
        return desks


class PrototypeConfig(BaseModel):
    """[prototype] section."""

    model_config = {"frozen": True}

    hobbies: list[str] = Field(default_factory=list)


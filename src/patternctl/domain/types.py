"""Closed enumerations that drive factory selection and chain dispatch.

Every member of these enums must map to exactly one concrete
implementation in the module that consumes it.
"""

from __future__ import annotations

from enum import StrEnum


class DocumentType(StrEnum):
    """Documents produced by the document factory."""

    REPORT = "report"
    SPREADSHEET = "spreadsheet"
    PRESENTATION = "presentation"


class OSType(StrEnum):
    """Look-and-feel families produced by the GUI abstract factory."""

    WINDOWS = "windows"
    MACOS = "macos"


class RequestType(StrEnum):
    """Categories of customer support requests."""

    BILLING = "billing"
    TECHNICAL = "technical"
    PRODUCT = "product"
    GENERAL = "general"
    COMPLAINT = "complaint"


class SupportDesk(StrEnum):
    """Handler variants of the support chain.

    ``NONE`` is the terminal desk: it accepts every request.
    """

    BILLING = "billing"
    PRODUCT = "product"
    TECHNICAL = "technical"
    GENERAL = "general"
    NONE = "none"


class SingletonVariant(StrEnum):
    """Initialization and protection disciplines of the singleton demos."""

    EAGER = "eager"
    LAZY = "lazy"
    THREAD_SAFE = "thread-safe"
    CLONING = "cloning"
    REFLECTION = "reflection"
    SERIALIZATION = "serialization"


class CopyStyle(StrEnum):
    """Prototype copying disciplines."""

    COPY = "copy"  # copy constructor
    CLONE = "clone"  # shallow clone, then fresh hobby list

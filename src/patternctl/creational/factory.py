"""Document factory: one concrete document class per DocumentType.

The registry below is the whole selection logic.  Every member of
:class:`DocumentType` must appear in it; a missing member is a
programming error surfaced as ``KeyError``, never a runtime condition.
"""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from typing import ClassVar

from patternctl.domain.types import DocumentType

logger = logging.getLogger(__name__)


class Document(ABC):
    """Capability interface shared by every produced document."""

    kind: ClassVar[DocumentType]

    @abstractmethod
    def open(self) -> None: ...

    @abstractmethod
    def save(self) -> None: ...

    @abstractmethod
    def close(self) -> None: ...


class Report(Document):
    kind: ClassVar[DocumentType] = DocumentType.REPORT

    def open(self) -> None:
        logger.info("Opening Report.")

    def save(self) -> None:
        logger.info("Saving Report.")

    def close(self) -> None:
        logger.info("Closing Report.")


class SpreadSheet(Document):
    kind: ClassVar[DocumentType] = DocumentType.SPREADSHEET

    def open(self) -> None:
        logger.info("Opening SpreadSheet.")

    def save(self) -> None:
        logger.info("Saving SpreadSheet.")

    def close(self) -> None:
        logger.info("Closing SpreadSheet.")


class Presentation(Document):
    kind: ClassVar[DocumentType] = DocumentType.PRESENTATION

    def open(self) -> None:
        logger.info("Opening Presentation.")

    def save(self) -> None:
        logger.info("Saving Presentation.")

    def close(self) -> None:
        logger.info("Closing Presentation.")


DOCUMENT_REGISTRY: dict[DocumentType, type[Document]] = {
    DocumentType.REPORT: Report,
    DocumentType.SPREADSHEET: SpreadSheet,
    DocumentType.PRESENTATION: Presentation,
}


def get_document(kind: DocumentType) -> Document:
    """Return a fresh document of the class registered for *kind*."""
    return DOCUMENT_REGISTRY[kind]()

"""Support chain of responsibility.

A chain is a singly linked list of :class:`SupportHandler` nodes.  Each
node is tagged with a :class:`SupportDesk`; a node whose desk covers the
request's category handles it and stops, otherwise it passes the request
to its successor.

INVARIANT: every chain ends in the ``SupportDesk.NONE`` terminal, which
handles any request, so dispatch always completes.

Chains are linked once, before any dispatch; linking is not thread-safe.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Iterator, Sequence
from functools import reduce

from pydantic import BaseModel

from patternctl.domain.types import RequestType, SupportDesk

logger = logging.getLogger(__name__)


class ChainNotLinkedError(RuntimeError):
    """A non-terminal handler was asked to delegate but has no successor."""


class Request(BaseModel):
    """Immutable support request, consumed once by a chain."""

    model_config = {"frozen": True}

    type: RequestType
    query: str


# Request categories each desk services.  The terminal desk maps to None
# and accepts everything.
DESK_CATEGORIES: dict[SupportDesk, RequestType | None] = {
    SupportDesk.BILLING: RequestType.BILLING,
    SupportDesk.PRODUCT: RequestType.PRODUCT,
    SupportDesk.TECHNICAL: RequestType.TECHNICAL,
    SupportDesk.GENERAL: RequestType.GENERAL,
    SupportDesk.NONE: None,
}

_DESK_MESSAGES: dict[SupportDesk, str] = {
    SupportDesk.BILLING: "Billing support.",
    SupportDesk.PRODUCT: "Product support.",
    SupportDesk.TECHNICAL: "Technical support.",
    SupportDesk.GENERAL: "General support.",
    SupportDesk.NONE: "No support handler.",
}

DEFAULT_DESKS: tuple[SupportDesk, ...] = (
    SupportDesk.BILLING,
    SupportDesk.PRODUCT,
    SupportDesk.TECHNICAL,
    SupportDesk.GENERAL,
)


class SupportHandler:
    """One node of a support chain.

    Attributes:
        desk: Which requests this node services.
        successor: Next node, or None for the terminal (and for nodes not
            yet linked).
    """

    def __init__(self, desk: SupportDesk) -> None:
        self.desk = desk
        self.successor: SupportHandler | None = None

    def __repr__(self) -> str:
        return f"SupportHandler({self.desk.value!r})"

    @property
    def is_terminal(self) -> bool:
        return self.desk is SupportDesk.NONE

    def link(self, successor: SupportHandler) -> SupportHandler:
        """Point this node at *successor* and return *successor*."""
        self.successor = successor
        return successor

    def can_handle(self, request: Request) -> bool:
        category = DESK_CATEGORIES[self.desk]
        return category is None or category == request.type

    def handle(self, request: Request) -> SupportHandler:
        """Service *request* here or pass it along.

        Returns the node that serviced the request.

        Raises:
            ChainNotLinkedError: If delegation is needed but no successor
                was linked.
        """
        if self.can_handle(request):
            if self.is_terminal:
                logger.info(
                    "%s Request unhandled: %s", _DESK_MESSAGES[self.desk], request.query
                )
            else:
                logger.info(_DESK_MESSAGES[self.desk])
            return self
        if self.successor is None:
            msg = f"{self!r} cannot service {request.type.value!r} and has no successor"
            raise ChainNotLinkedError(msg)
        logger.debug("%s passing %s request on", self.desk.value, request.type.value)
        return self.successor.handle(request)


def build_chain(handlers: Sequence[SupportHandler]) -> SupportHandler:
    """Link *handlers* in order and return the head.

    A terminal handler is appended unless the sequence already ends in
    one.  An empty sequence yields a chain of just the terminal.
    """
    if not handlers:
        return SupportHandler(SupportDesk.NONE)
    tail = reduce(lambda prev, current: prev.link(current), handlers)
    if not tail.is_terminal:
        tail.link(SupportHandler(SupportDesk.NONE))
    return handlers[0]


def chain_from_desks(desks: Iterable[SupportDesk | str]) -> SupportHandler:
    """Build a chain with one fresh handler per desk name, in order."""
    return build_chain([SupportHandler(SupportDesk(desk)) for desk in desks])


def default_chain() -> SupportHandler:
    """Billing, product, technical, general, then the terminal."""
    return chain_from_desks(DEFAULT_DESKS)


def iter_chain(head: SupportHandler) -> Iterator[SupportHandler]:
    """Yield every node from *head* to the end of the chain."""
    node: SupportHandler | None = head
    while node is not None:
        yield node
        node = node.successor

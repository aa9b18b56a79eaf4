"""Support service: route a request through the configured chain."""

from __future__ import annotations

import logging

from patternctl.behavioral.chain import Request, chain_from_desks, iter_chain
from patternctl.domain.types import RequestType
from patternctl.services.base import BaseService
from patternctl.services.result import ServiceResult

logger = logging.getLogger(__name__)


class SupportService(BaseService):
    """Dispatch support requests through a chain built from ``[chain] desks``."""

    def dispatch(self, request_type: str, query: str) -> ServiceResult:
        op = "support_dispatch"
        try:
            category = RequestType(request_type.lower())
        except ValueError:
            return self._unknown_kind(op, request_type, RequestType)

        head = chain_from_desks(self._settings.chain.desks)
        handler = head.handle(Request(type=category, query=query))

        warnings: list[str] = []
        if handler.is_terminal:
            warnings.append(f"No desk services {category.value!r} requests")
            logger.debug("Request fell through to the terminal handler: %s", query)

        return ServiceResult(
            ok=True,
            op=op,
            data={
                "type": category.value,
                "query": query,
                "handled_by": handler.desk.value,
                "handled": not handler.is_terminal,
                "chain": [node.desk.value for node in iter_chain(head)],
            },
            warnings=warnings,
        )

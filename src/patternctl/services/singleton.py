"""Singleton service: report identity and guard behavior per variant."""

from __future__ import annotations

import copy
import pickle
from typing import Any

from patternctl.creational.singleton import SINGLETON_VARIANTS, SingletonStateError
from patternctl.domain.types import SingletonVariant
from patternctl.services.base import BaseService
from patternctl.services.result import ServiceResult


def _guard_holds(variant: SingletonVariant, instance: Any) -> bool | None:
    """Exercise the variant's protection; None when it has none."""
    if variant is SingletonVariant.CLONING:
        return (
            instance.clone() is instance
            and copy.copy(instance) is instance
            and copy.deepcopy(instance) is instance
        )
    if variant is SingletonVariant.SERIALIZATION:
        return pickle.loads(pickle.dumps(instance)) is instance
    if variant is SingletonVariant.REFLECTION:
        try:
            type(instance)()
        except SingletonStateError:
            return True
        return False
    return None


class SingletonService(BaseService):
    """Inspect one or all singleton variants."""

    def inspect(self, variant: str | None = None) -> ServiceResult:
        op = "singleton_inspect"
        if variant is None:
            selected = list(SingletonVariant)
        else:
            try:
                selected = [SingletonVariant(variant.lower())]
            except ValueError:
                return self._unknown_kind(op, variant, SingletonVariant)

        rows: list[dict[str, Any]] = []
        warnings: list[str] = []
        for member in selected:
            cls = SINGLETON_VARIANTS[member]
            first = cls.get_instance()
            second = cls.get_instance()
            rows.append(
                {
                    "variant": member.value,
                    "class": cls.__name__,
                    "identical": first is second,
                    "instance_id": f"{id(first):#x}",
                    "guard_holds": _guard_holds(member, first),
                }
            )
            if member is SingletonVariant.LAZY:
                warnings.append("SingletonLazy is not thread-safe; prefer SingletonThreadSafe")

        return ServiceResult(ok=True, op=op, data={"items": rows}, warnings=warnings)

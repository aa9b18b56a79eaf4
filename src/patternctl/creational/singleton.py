"""Singleton variants: one class per initialization/protection discipline.

| Class                        | Instance created        | Guards against         |
|------------------------------|-------------------------|------------------------|
| SingletonEager               | module import           | none                   |
| SingletonLazy                | first ``get_instance``  | nothing (thread-unsafe)|
| SingletonThreadSafe          | first ``get_instance``  | concurrent first use   |
| SingletonWithCloning         | module import           | copy / deepcopy        |
| SingletonWithReflection      | module import           | direct construction    |
| SingletonWithSerialization   | module import           | pickle round-trips     |

``SingletonLazy`` keeps the unsynchronized check-then-create on purpose:
two threads racing through the first call can each construct an
instance.  Use ``SingletonThreadSafe`` anywhere threads are involved.
"""

from __future__ import annotations

import logging
import threading
from typing import Any, ClassVar

from patternctl.domain.types import SingletonVariant

logger = logging.getLogger(__name__)


class SingletonStateError(RuntimeError):
    """Raised when a guarded singleton is constructed a second time."""


class SingletonEager:
    """Instance built while the module is imported."""

    _INSTANCE: ClassVar[SingletonEager]

    @classmethod
    def get_instance(cls) -> SingletonEager:
        return cls._INSTANCE


SingletonEager._INSTANCE = SingletonEager()


class SingletonLazy:
    """UNSAFE under threads: built on first access without any lock."""

    _instance: ClassVar[SingletonLazy | None] = None

    @classmethod
    def get_instance(cls) -> SingletonLazy:
        if cls._instance is None:
            cls._instance = cls()
            logger.debug("Created lazy singleton %#x", id(cls._instance))
        return cls._instance


class SingletonThreadSafe:
    """Lazy instance guarded by double-checked locking.

    The first check runs without the lock so initialized reads never
    contend.  The second check, inside the lock, guarantees at most one
    construction however many threads arrive first.
    """

    _instance: ClassVar[SingletonThreadSafe | None] = None
    _lock: ClassVar[threading.Lock] = threading.Lock()

    @classmethod
    def get_instance(cls) -> SingletonThreadSafe:
        if cls._instance is None:
            with cls._lock:
                if cls._instance is None:
                    cls._instance = cls()
                    logger.debug("Created thread-safe singleton %#x", id(cls._instance))
        return cls._instance


class SingletonWithCloning:
    """Duplication hooks hand back the canonical instance."""

    _INSTANCE: ClassVar[SingletonWithCloning]

    @classmethod
    def get_instance(cls) -> SingletonWithCloning:
        return cls._INSTANCE

    def clone(self) -> SingletonWithCloning:
        return self._INSTANCE

    def __copy__(self) -> SingletonWithCloning:
        return self._INSTANCE

    def __deepcopy__(self, memo: dict[int, Any]) -> SingletonWithCloning:
        return self._INSTANCE


SingletonWithCloning._INSTANCE = SingletonWithCloning()


class SingletonWithReflection:
    """Constructor refuses to run once the canonical instance exists."""

    _INSTANCE: ClassVar[SingletonWithReflection]

    def __init__(self) -> None:
        if hasattr(type(self), "_INSTANCE"):
            msg = "Singleton instance already exists."
            raise SingletonStateError(msg)

    @classmethod
    def get_instance(cls) -> SingletonWithReflection:
        return cls._INSTANCE


SingletonWithReflection._INSTANCE = SingletonWithReflection()


class SingletonWithSerialization:
    """Unpickling resolves to the canonical instance, not a new one."""

    _INSTANCE: ClassVar[SingletonWithSerialization]

    @classmethod
    def get_instance(cls) -> SingletonWithSerialization:
        return cls._INSTANCE

    def __reduce__(self) -> tuple[Any, tuple[()]]:
        return (SingletonWithSerialization.get_instance, ())


SingletonWithSerialization._INSTANCE = SingletonWithSerialization()


SINGLETON_VARIANTS: dict[SingletonVariant, type] = {
    SingletonVariant.EAGER: SingletonEager,
    SingletonVariant.LAZY: SingletonLazy,
    SingletonVariant.THREAD_SAFE: SingletonThreadSafe,
    SingletonVariant.CLONING: SingletonWithCloning,
    SingletonVariant.REFLECTION: SingletonWithReflection,
    SingletonVariant.SERIALIZATION: SingletonWithSerialization,
}

"""Lazily constructed, type-keyed single instances.

A :class:`SingletonHolder` owns one instance per class. The first ``get`` for
a class constructs it (by calling the class with no arguments); every later
call returns that same object. Construction is serialised per class, so
concurrent first accesses still build exactly one instance.

The holder is an ordinary object rather than module state: create one where
the instances should live and call :meth:`SingletonHolder.reset` to tear them
down.

Examples:
    >>> holder = SingletonHolder()
    >>> service = holder.get(MyService)
    >>> service is holder.get(MyService)
    True
"""

import logging
import threading
import typing as tp

__all__ = ["SingletonHolder"]

logger = logging.getLogger(__name__)

T = tp.TypeVar("T")


class SingletonHolder:
    """Owns at most one instance of each class it is asked for."""

    def __init__(self) -> None:
        self._instances: tp.Dict[type, tp.Any] = {}
        self._locks: tp.Dict[type, threading.Lock] = {}
        self._registry_lock = threading.Lock()

    def get(self, cls: tp.Type[T]) -> T:
        """Return the instance of ``cls``, constructing it on first access.

        Args:
            cls: Class to instantiate. Must be callable without arguments.

        Returns:
            The single instance owned by this holder.

        Raises:
            Exception: Whatever the constructor raises. Nothing is cached on
                failure, so a later call attempts construction again.
        """
        # Fast path: already built
        instance = self._instances.get(cls)
        if instance is not None:
            return instance

        with self._lock_for(cls):
            # Another thread may have finished while we waited
            if cls in self._instances:
                return self._instances[cls]

            logger.debug(f"Constructing singleton instance of {cls.__qualname__}")
            instance = cls()
            self._instances[cls] = instance
            return instance

    def reset(self, cls: tp.Optional[type] = None) -> None:
        """Drop the instance of ``cls``, or every instance when ``cls`` is None.

        Per-class locks are kept, so a reset waits for a construction already
        in progress and never lets two threads build the same class at once.
        """
        if cls is None:
            with self._registry_lock:
                classes = list(self._locks)
            for each in classes:
                self.reset(each)
            return

        with self._lock_for(cls):
            self._instances.pop(cls, None)

    def _lock_for(self, cls: type) -> threading.Lock:
        with self._registry_lock:
            lock = self._locks.get(cls)
            if lock is None:
                lock = threading.Lock()
                self._locks[cls] = lock
            return lock

    def __contains__(self, cls: type) -> bool:
        return cls in self._instances

    def __len__(self) -> int:
        return len(self._instances)

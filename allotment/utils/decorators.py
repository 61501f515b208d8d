"""Utility decorators for the simulator."""

import functools
import logging
from typing import Any, Optional, TypeVar

T = TypeVar("T")

logger = logging.getLogger(__name__)


def singleton(cls: type[T]) -> type[T]:
    """
    Make a class process-wide: every call returns the first instance created.

    Constructor arguments only count on the first call. Later calls that pass
    arguments get the existing instance and a debug log line.

    Usage:
        @singleton
        class BudgetSession:
            ...

        assert BudgetSession() is BudgetSession()

    ``_clear()`` drops the instance; the next call constructs a fresh one.
    """
    instance: Optional[T] = None

    @functools.wraps(cls)
    def get_instance(*args: Any, **kwargs: Any) -> T:
        nonlocal instance
        if instance is None:
            instance = cls(*args, **kwargs)
        elif args or kwargs:
            logger.debug(f"{cls.__name__} already created; ignoring constructor arguments")
        return instance

    def clear() -> None:
        nonlocal instance
        instance = None

    get_instance._clear = clear  # type: ignore

    return get_instance  # type: ignore

"""Retry-safe invocation of zero-argument functions.

:func:`timeout_safe_invoke` calls a function and, when it fails with a
transient error (a timeout, a dropped connection, or an explicit
:class:`TransientOperationError`), logs the failure and tries again. Any other
exception is raised straight away.

Invariants:
    - At most ``max_attempts`` calls (default ``settings.RETRY_MAX_ATTEMPTS``, 3)
    - Each transient failure is logged once at WARNING level
    - Non-transient failures propagate on the first occurrence, unlogged
    - After the last attempt the last transient exception is re-raised as is

The pause between attempts is a *delay strategy*: a callable mapping the
1-based number of the attempt that just failed to a delay in seconds.

Examples:
    >>> from seqforge.functional.invoke import timeout_safe_invoke, constant_delay
    >>> data = timeout_safe_invoke(fetch_page, delay=constant_delay(0.5))
"""

import time
import typing as tp

from seqforge.core.config import settings
from seqforge.core.exceptions import InvalidArgumentError, TransientOperationError
from seqforge.logger.logger import get_logger

__all__ = [
    "TRANSIENT_ERRORS",
    "DelayStrategy",
    "no_delay",
    "constant_delay",
    "exponential_delay",
    "timeout_safe_invoke",
]

logger = get_logger(__name__)

T = tp.TypeVar("T")

DelayStrategy = tp.Callable[[int], float]

TRANSIENT_ERRORS: tp.Tuple[tp.Type[BaseException], ...] = (
    TransientOperationError,
    TimeoutError,
    ConnectionError,
)


def no_delay() -> DelayStrategy:
    """Retry immediately."""
    return lambda attempt: 0.0


def constant_delay(seconds: float) -> DelayStrategy:
    """Wait the same number of seconds before every retry."""
    if seconds < 0:
        raise InvalidArgumentError(f"must not be negative, got {seconds}", argument="seconds")
    return lambda attempt: seconds


def exponential_delay(
    base: float, factor: float = 2.0, maximum: tp.Optional[float] = None
) -> DelayStrategy:
    """Wait ``base * factor ** (attempt - 1)`` seconds, capped at ``maximum``.

    Args:
        base: Delay after the first failure.
        factor: Growth per further failure.
        maximum: Upper bound on any single delay, or None for no bound.

    Returns:
        The delay strategy.
    """
    if base < 0:
        raise InvalidArgumentError(f"must not be negative, got {base}", argument="base")

    def strategy(attempt: int) -> float:
        delay = base * factor ** (attempt - 1)
        return delay if maximum is None else min(delay, maximum)

    return strategy


def _default_delay() -> DelayStrategy:
    if settings.RETRY_DELAY_SECONDS > 0:
        return constant_delay(settings.RETRY_DELAY_SECONDS)
    return no_delay()


def timeout_safe_invoke(
    function: tp.Callable[[], T],
    *,
    max_attempts: tp.Optional[int] = None,
    delay: tp.Optional[DelayStrategy] = None,
    transient: tp.Tuple[tp.Type[BaseException], ...] = TRANSIENT_ERRORS,
    sleep: tp.Callable[[float], None] = time.sleep,
) -> T:
    """Call ``function`` and retry it on transient failures.

    Args:
        function: Zero-argument callable to invoke.
        max_attempts: Total number of calls allowed. Defaults to
            ``settings.RETRY_MAX_ATTEMPTS``.
        delay: Delay strategy between attempts. Defaults to a constant
            ``settings.RETRY_DELAY_SECONDS`` (no delay when 0).
        transient: Exception types treated as retryable.
        sleep: Function used to wait; replaceable in tests.

    Returns:
        The first successful result of ``function``.

    Raises:
        InvalidArgumentError: If ``function`` is not callable or
            ``max_attempts`` is less than 1.
        Exception: The last transient exception once attempts run out, or any
            non-transient exception immediately.
    """
    if not callable(function):
        raise InvalidArgumentError(f"is not callable: {function!r}", argument="function")

    max_attempts = settings.RETRY_MAX_ATTEMPTS if max_attempts is None else max_attempts
    if max_attempts < 1:
        raise InvalidArgumentError(
            f"must be at least 1, got {max_attempts}", argument="max_attempts"
        )
    delay = delay or _default_delay()
    name = getattr(function, "__qualname__", repr(function))

    for attempt in range(1, max_attempts + 1):
        try:
            return function()
        except transient as e:
            logger.warning(
                f"Attempt {attempt}/{max_attempts} of {name} failed with "
                f"{type(e).__name__}: {e}"
            )
            if attempt == max_attempts:
                raise
            wait = delay(attempt)
            if wait > 0:
                sleep(wait)

    # Unreachable: the loop either returns or raises
    raise AssertionError("retry loop exited without a result")

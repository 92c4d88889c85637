"""
Composite Logger - Fan-out over Other Loggers.

Satisfies the MessageLogger protocol by delegating each message to an
ordered, fixed collection of other loggers.

Failure Policies:
    - FAIL_FAST: Stop at the first failing member and re-raise its error
    - FAIL_SOFT: Try every member, then raise CompositeLogError listing
      each failure in member order

Design Notes:
    - Members are validated and frozen at construction
    - Delegation order equals insertion order
    - An empty composite is a valid no-op
"""

from __future__ import annotations

import logging
from enum import Enum
from typing import Any, Iterable, List, Optional, Tuple

from capability_registry.errors import CompositeLogError, ConfigurationError
from capability_registry.interfaces.message_logger import MessageLogger

logger = logging.getLogger(__name__)


class FailurePolicy(Enum):
    """How a composite reacts to a failing member."""
    FAIL_FAST = "fail_fast"
    FAIL_SOFT = "fail_soft"


class CompositeLogger:
    """Message logger that delegates to other message loggers in order."""

    def __init__(
        self,
        loggers: Optional[Iterable[MessageLogger]],
        failure_policy: FailurePolicy = FailurePolicy.FAIL_FAST,
    ) -> None:
        """
        Initialize composite logger.

        Args:
            loggers: Member loggers, in delegation order
            failure_policy: Behavior when a member raises

        Raises:
            ConfigurationError: If loggers is None or any member does
                not satisfy MessageLogger
        """
        if loggers is None:
            raise ConfigurationError("CompositeLogger requires a logger sequence, got None")

        members = tuple(loggers)
        invalid = [
            m for m in members
            if isinstance(m, type) or not isinstance(m, MessageLogger)
        ]
        if invalid:
            raise ConfigurationError(
                f"CompositeLogger members must implement log(message): "
                f"{[type(m).__name__ for m in invalid]}"
            )

        self._members: Tuple[MessageLogger, ...] = members
        self._failure_policy = FailurePolicy(failure_policy)

    @property
    def members(self) -> Tuple[MessageLogger, ...]:
        """Member loggers in delegation order."""
        return self._members

    @property
    def failure_policy(self) -> FailurePolicy:
        """Configured failure policy."""
        return self._failure_policy

    def log(self, message: str) -> None:
        """
        Delegate the message to every member in order.

        Raises:
            Exception: The first member error, under FAIL_FAST
            CompositeLogError: After all members ran, under FAIL_SOFT
        """
        if self._failure_policy is FailurePolicy.FAIL_FAST:
            self._log_fail_fast(message)
        else:
            self._log_fail_soft(message)

    def _log_fail_fast(self, message: str) -> None:
        for index, member in enumerate(self._members):
            try:
                member.log(message)
            except Exception as e:
                logger.error(
                    f"Logger {index} ({type(member).__name__}) failed, "
                    f"skipping {len(self._members) - index - 1} remaining: {e}"
                )
                raise

    def _log_fail_soft(self, message: str) -> None:
        failures: List[Tuple[Any, Exception]] = []

        for member in self._members:
            try:
                member.log(message)
            except Exception as e:
                failures.append((member, e))
                logger.warning(f"Logger {type(member).__name__} failed: {e}")

        if failures:
            raise CompositeLogError(failures)

    def __len__(self) -> int:
        return len(self._members)

    def __repr__(self) -> str:
        return (
            f"CompositeLogger({list(self._members)!r}, "
            f"failure_policy={self._failure_policy.name})"
        )

"""
Provisioning saga — ordered writes with compensating actions.

The store offers no multi-table transaction here, so a failed step is undone by
running the compensations of the steps that already succeeded, newest first.
When one of those compensations fails too, the outcome is ``SagaOrphaned`` and
the caller is expected to log the leftover records for manual reconciliation.
"""

from dataclasses import dataclass, field
from typing import Any, Callable, Optional, Union

import structlog

logger = structlog.get_logger(__name__)


@dataclass
class SagaStep:
    name: str
    action: Callable[[dict[str, Any]], Any]
    compensation: Optional[Callable[[Any], None]] = None


@dataclass(frozen=True)
class SagaCompleted:
    results: dict[str, Any]
    kind: str = "completed"


@dataclass(frozen=True)
class SagaCompensated:
    failed_step: str
    cause: Exception
    results: dict[str, Any] = field(default_factory=dict)
    kind: str = "compensated"


@dataclass(frozen=True)
class SagaOrphaned:
    failed_step: str
    cause: Exception
    compensation_errors: list[tuple[str, Exception]]
    results: dict[str, Any] = field(default_factory=dict)
    kind: str = "orphaned"


SagaOutcome = Union[SagaCompleted, SagaCompensated, SagaOrphaned]


class ProvisioningSaga:
    """Run steps in order; on failure compensate the completed ones in reverse."""

    def __init__(self, name: str):
        self.name = name
        self.steps: list[SagaStep] = []

    def step(
        self,
        name: str,
        action: Callable[[dict[str, Any]], Any],
        compensation: Optional[Callable[[Any], None]] = None,
    ) -> "ProvisioningSaga":
        self.steps.append(SagaStep(name, action, compensation))
        return self

    def run(self) -> SagaOutcome:
        results: dict[str, Any] = {}
        completed: list[SagaStep] = []

        for step in self.steps:
            try:
                results[step.name] = step.action(results)
            except Exception as exc:
                logger.warning("saga.step_failed", saga=self.name, step=step.name, error=str(exc))
                return self._compensate(step.name, exc, completed, results)
            completed.append(step)

        return SagaCompleted(results)

    def _compensate(
        self,
        failed_step: str,
        cause: Exception,
        completed: list[SagaStep],
        results: dict[str, Any],
    ) -> SagaOutcome:
        errors: list[tuple[str, Exception]] = []
        for step in reversed(completed):
            if step.compensation is None:
                continue
            try:
                step.compensation(results[step.name])
            except Exception as exc:
                logger.error("saga.compensation_failed", saga=self.name, step=step.name, error=str(exc))
                errors.append((step.name, exc))

        if errors:
            return SagaOrphaned(failed_step, cause, errors, results)
        return SagaCompensated(failed_step, cause, results)

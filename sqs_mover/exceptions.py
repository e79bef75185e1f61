# Copyright 2025 Loopper-AI
# Errors raised while moving messages between queues

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from .models import BatchFailure


class MoverError(Exception):
    """Base class for every condition that ends a transfer."""


class ResolutionError(MoverError):
    """Queue name could not be resolved to a URL."""

    def __init__(self, queue_name: str, reason: str):
        self.queue_name = queue_name
        self.reason = reason
        super().__init__(f"Failed to resolve queue {queue_name}. Error: {reason}")


class ServiceError(MoverError):
    """Transport or API failure of a whole SQS call."""

    def __init__(self, operation: str, reason: str, code: str | None = None):
        self.operation = operation
        self.reason = reason
        self.code = code
        detail = f"[{code}] {reason}" if code else reason
        super().__init__(f"{operation} failed. Error: {detail}")


class PartialBatchFailure(MoverError):
    """A batch call reported failures for some of its entries."""

    def __init__(self, operation: str, failures: list[BatchFailure]):
        self.operation = operation
        self.failures = list(failures)
        details = "; ".join(str(f) for f in self.failures)
        super().__init__(f"{operation}: {len(self.failures)} entries failed: {details}")

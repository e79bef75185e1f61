# Copyright 2025 Loopper-AI
# Configuration management for the SQS mover

from __future__ import annotations

import os
from dataclasses import dataclass, replace

DEFAULT_REGION = "us-east-1"
DEFAULT_VISIBILITY_TIMEOUT = 30
MIN_VISIBILITY_TIMEOUT = 2
MAX_VISIBILITY_TIMEOUT = 43200
MAX_WAIT_TIME_SECONDS = 20


@dataclass(frozen=True)
class Config:
    """Immutable mover configuration from environment variables and CLI flags."""

    source_queue: str = ""
    destination_queue: str = ""
    profile: str | None = None
    region: str = DEFAULT_REGION
    visibility_timeout: int = DEFAULT_VISIBILITY_TIMEOUT
    wait_time_seconds: int = 0
    log_level: str = "INFO"

    @classmethod
    def from_environment(cls) -> Config:
        return cls(
            source_queue=(os.environ.get("SQS_MOVER_SOURCE") or "").strip(),
            destination_queue=(os.environ.get("SQS_MOVER_DESTINATION") or "").strip(),
            profile=os.environ.get("AWS_PROFILE") or None,
            region=os.environ.get("AWS_REGION") or DEFAULT_REGION,
            visibility_timeout=int(os.environ.get("SQS_MOVER_VISIBILITY_TIMEOUT", str(DEFAULT_VISIBILITY_TIMEOUT))),
            wait_time_seconds=int(os.environ.get("SQS_MOVER_WAIT_TIME", "0")),
            log_level=os.environ.get("LOG_LEVEL", "INFO").upper(),
        )

    def with_overrides(self, **values) -> Config:
        """Return a copy with every non-None value applied."""
        changes = {k: v for k, v in values.items() if v is not None}
        if "log_level" in changes:
            changes["log_level"] = changes["log_level"].upper()
        return replace(self, **changes)

    def validate(self) -> tuple[bool, str | None]:
        if not self.source_queue:
            return False, "Source queue required (--source or SQS_MOVER_SOURCE)"
        if not self.destination_queue:
            return False, "Destination queue required (--destination or SQS_MOVER_DESTINATION)"
        if self.source_queue == self.destination_queue:
            return False, "Source and destination queues must differ"
        if not MIN_VISIBILITY_TIMEOUT <= self.visibility_timeout <= MAX_VISIBILITY_TIMEOUT:
            return False, (
                f"Visibility timeout must be between {MIN_VISIBILITY_TIMEOUT} and {MAX_VISIBILITY_TIMEOUT} seconds"
            )
        if not 0 <= self.wait_time_seconds <= MAX_WAIT_TIME_SECONDS:
            return False, f"Wait time must be between 0 and {MAX_WAIT_TIME_SECONDS} seconds"
        return True, None

# Copyright 2025 Loopper-AI
# Data models for the SQS mover

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Literal

from .exceptions import MoverError

TransferState = Literal["draining", "empty", "failed"]

MAX_BATCH_SIZE = 10


@dataclass(frozen=True)
class Message:
    """Message received from the source queue."""

    message_id: str
    body: str
    receipt_handle: str

    @classmethod
    def from_response(cls, raw: dict[str, Any]) -> Message | None:
        """Build from a receive_message item. Returns None if fields are missing."""
        message_id = raw.get("MessageId")
        receipt_handle = raw.get("ReceiptHandle")
        body = raw.get("Body")
        if not message_id or not receipt_handle or body is None:
            return None
        return cls(message_id=message_id, body=body, receipt_handle=receipt_handle)


@dataclass(frozen=True)
class ForwardEntry:
    """SendMessageBatch entry."""

    id: str
    body: str

    def to_request(self) -> dict[str, str]:
        return {"Id": self.id, "MessageBody": self.body}


@dataclass(frozen=True)
class DeleteEntry:
    """DeleteMessageBatch entry."""

    id: str
    receipt_handle: str

    def to_request(self) -> dict[str, str]:
        return {"Id": self.id, "ReceiptHandle": self.receipt_handle}


@dataclass(frozen=True)
class BatchFailure:
    """Per-entry failure reported by a batch call."""

    id: str
    code: str = ""
    message: str = ""
    sender_fault: bool = False

    @classmethod
    def from_response(cls, raw: dict[str, Any]) -> BatchFailure:
        return cls(
            id=str(raw.get("Id", "")),
            code=raw.get("Code", ""),
            message=raw.get("Message", ""),
            sender_fault=bool(raw.get("SenderFault", False)),
        )

    def __str__(self) -> str:
        fault = "sender" if self.sender_fault else "service"
        text = f"{self.id} ({fault} fault)"
        if self.code:
            text += f" {self.code}"
        if self.message:
            text += f": {self.message}"
        return text


@dataclass
class BatchOutcome:
    """Result of a SendMessageBatch or DeleteMessageBatch call."""

    successful: list[str] = field(default_factory=list)
    failed: list[BatchFailure] = field(default_factory=list)

    @property
    def has_failures(self) -> bool:
        return len(self.failed) > 0


@dataclass
class TransferProgress:
    """Running count of moved messages against an advisory total."""

    moved: int = 0
    total: int = 0

    def advance(self, count: int) -> None:
        self.moved += count
        # The initial total is an approximation; never let it fall behind.
        if self.moved > self.total:
            self.total = self.moved


@dataclass
class MoveResult:
    """Final outcome of a transfer run."""

    moved_count: int
    total: int
    state: TransferState
    error: MoverError | None = None

    @property
    def succeeded(self) -> bool:
        return self.state == "empty" and self.error is None

    @property
    def exit_code(self) -> int:
        return 0 if self.succeeded else 1

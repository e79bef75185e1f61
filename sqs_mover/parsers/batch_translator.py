# Copyright 2025 Loopper-AI
# Conversion between received messages and batch request entries

from __future__ import annotations

from collections.abc import Iterable, Sequence

from ..models import DeleteEntry, ForwardEntry, Message


class BatchTranslator:
    """Maps received messages to SendMessageBatch and DeleteMessageBatch entries.

    The message id is used as the entry id so send and delete results can be
    correlated back to the message that produced them.
    """

    @staticmethod
    def to_forward_entries(messages: Sequence[Message]) -> list[ForwardEntry]:
        return [ForwardEntry(id=m.message_id, body=m.body) for m in messages]

    @staticmethod
    def to_delete_entries(messages: Sequence[Message]) -> list[DeleteEntry]:
        return [DeleteEntry(id=m.message_id, receipt_handle=m.receipt_handle) for m in messages]

    @staticmethod
    def select_confirmed(messages: Sequence[Message], successful_ids: Iterable[str]) -> list[Message]:
        """Messages whose id appears in successful_ids, in input order."""
        confirmed = set(successful_ids)
        return [m for m in messages if m.message_id in confirmed]

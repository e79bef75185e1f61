# Copyright 2025 Loopper-AI
# SQS queue operations used by the mover

from __future__ import annotations

import logging
from collections.abc import Sequence
from typing import Any

from botocore.exceptions import BotoCoreError, ClientError

from ..exceptions import PartialBatchFailure, ResolutionError, ServiceError
from ..models import BatchFailure, BatchOutcome, DeleteEntry, ForwardEntry, Message

logger = logging.getLogger(__name__)


def _describe(error: ClientError | BotoCoreError) -> tuple[str, str | None]:
    """Message and error code of a botocore exception."""
    if isinstance(error, ClientError):
        details = error.response.get("Error", {})
        return details.get("Message") or str(error), details.get("Code")
    return str(error), None


class SQSService:
    """SQS queue operations over a boto3 client.

    Every botocore failure is re-raised as a ServiceError (or ResolutionError
    for queue lookups) so callers only deal with the mover's error types.
    """

    def __init__(self, client: Any):
        self._client = client

    def resolve_queue_url(self, queue_name: str) -> str:
        try:
            response = self._client.get_queue_url(QueueName=queue_name)
        except (ClientError, BotoCoreError) as e:
            reason, code = _describe(e)
            logger.debug("GetQueueUrl failed for %s [%s]: %s", queue_name, code, reason)
            raise ResolutionError(queue_name, reason) from e
        return response["QueueUrl"]

    def get_approximate_count(self, queue_url: str) -> int:
        try:
            response = self._client.get_queue_attributes(
                QueueUrl=queue_url,
                AttributeNames=["ApproximateNumberOfMessages"],
            )
        except (ClientError, BotoCoreError) as e:
            reason, code = _describe(e)
            raise ServiceError("GetQueueAttributes", reason, code) from e
        return int(response.get("Attributes", {}).get("ApproximateNumberOfMessages", 0))

    def receive(
        self,
        queue_url: str,
        max_messages: int,
        visibility_timeout: int,
        wait_seconds: int,
    ) -> list[Message]:
        try:
            response = self._client.receive_message(
                QueueUrl=queue_url,
                MaxNumberOfMessages=max_messages,
                VisibilityTimeout=visibility_timeout,
                WaitTimeSeconds=wait_seconds,
            )
        except (ClientError, BotoCoreError) as e:
            reason, code = _describe(e)
            raise ServiceError("ReceiveMessage", reason, code) from e

        messages, malformed = [], []
        for raw in response.get("Messages", []):
            message = Message.from_response(raw)
            if message is None:
                malformed.append(
                    BatchFailure(id=str(raw.get("MessageId", "")), message="missing MessageId, ReceiptHandle or Body")
                )
                continue
            messages.append(message)
        if malformed:
            # Nothing from this receive is forwarded; the lease expires and the items reappear.
            raise PartialBatchFailure("ReceiveMessage", malformed)
        return messages

    def forward_batch(self, queue_url: str, entries: Sequence[ForwardEntry]) -> BatchOutcome:
        return self._batch_call(
            "SendMessageBatch",
            self._client.send_message_batch,
            queue_url,
            [e.to_request() for e in entries],
        )

    def delete_batch(self, queue_url: str, entries: Sequence[DeleteEntry]) -> BatchOutcome:
        return self._batch_call(
            "DeleteMessageBatch",
            self._client.delete_message_batch,
            queue_url,
            [e.to_request() for e in entries],
        )

    def _batch_call(self, operation: str, call: Any, queue_url: str, entries: list[dict[str, str]]) -> BatchOutcome:
        try:
            response = call(QueueUrl=queue_url, Entries=entries)
        except (ClientError, BotoCoreError) as e:
            reason, code = _describe(e)
            raise ServiceError(operation, reason, code) from e

        outcome = BatchOutcome(
            successful=[s["Id"] for s in response.get("Successful", [])],
            failed=[BatchFailure.from_response(f) for f in response.get("Failed", [])],
        )
        for failure in outcome.failed:
            logger.warning("%s entry failed: %s", operation, failure)
        return outcome

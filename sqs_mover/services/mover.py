# Copyright 2025 Loopper-AI
# Transfer loop: source queue → destination queue
#
# Each iteration receives up to 10 messages, forwards them in one
# SendMessageBatch and deletes them from the source in one DeleteMessageBatch.
#
# A batch is all-or-nothing:
#   forward error or any failed entry → stop, nothing deleted
#   delete error or any failed entry  → stop, forwarded copies may duplicate
# Undeleted messages become visible again once the visibility timeout expires,
# so re-running the transfer after a failure is safe.

from __future__ import annotations

import logging

from ..config import Config
from ..exceptions import MoverError, PartialBatchFailure
from ..models import MAX_BATCH_SIZE, BatchFailure, Message, MoveResult, TransferProgress, TransferState
from ..parsers import BatchTranslator
from ..utils.progress import NullReporter, ProgressReporter
from .sqs_service import SQSService

logger = logging.getLogger(__name__)


class MessageMover:
    """Moves every visible message from a source queue to a destination queue."""

    def __init__(self, service: SQSService, config: Config, reporter: ProgressReporter | None = None):
        self._service = service
        self._config = config
        self._reporter = reporter or NullReporter()
        self.state: TransferState = "draining"

    def move(self, source_url: str, destination_url: str, approximate_total: int) -> MoveResult:
        """Drain source_url into destination_url.

        approximate_total only scales the progress display. The loop ends when a
        receive returns no messages or on the first failure.
        """
        progress = TransferProgress(total=max(approximate_total, 0))
        self.state = "draining"
        logger.info("Starting to move messages...")

        try:
            while True:
                batch = self._service.receive(
                    source_url,
                    MAX_BATCH_SIZE,
                    self._config.visibility_timeout,
                    self._config.wait_time_seconds,
                )
                if not batch:
                    self.state = "empty"
                    logger.info("Done. Moved %d messages", progress.moved)
                    return MoveResult(moved_count=progress.moved, total=progress.total, state=self.state)

                self._transfer_batch(batch, source_url, destination_url)

                progress.advance(len(batch))
                self._reporter.report(progress.moved, progress.total)
        except MoverError as e:
            self.state = "failed"
            logger.error("Transfer stopped after moving %d messages. %s", progress.moved, e)
            return MoveResult(moved_count=progress.moved, total=progress.total, state=self.state, error=e)
        finally:
            self._reporter.close()

    def _transfer_batch(self, batch: list[Message], source_url: str, destination_url: str) -> None:
        logger.debug("Forwarding batch of %d messages", len(batch))
        sent = self._service.forward_batch(destination_url, BatchTranslator.to_forward_entries(batch))
        if sent.has_failures:
            raise PartialBatchFailure("SendMessageBatch", sent.failed)

        confirmed = BatchTranslator.select_confirmed(batch, sent.successful)
        if len(confirmed) != len(batch):
            confirmed_ids = {m.message_id for m in confirmed}
            raise PartialBatchFailure(
                "SendMessageBatch",
                [
                    BatchFailure(id=m.message_id, message="no delivery confirmation")
                    for m in batch
                    if m.message_id not in confirmed_ids
                ],
            )

        deleted = self._service.delete_batch(source_url, BatchTranslator.to_delete_entries(confirmed))
        if deleted.has_failures:
            raise PartialBatchFailure("DeleteMessageBatch", deleted.failed)
        logger.debug("Deleted %d messages from source", len(confirmed))

# Copyright 2025 Loopper-AI
# Move messages between SQS queues, e.g. to requeue a dead-letter queue

from .config import Config
from .exceptions import MoverError, PartialBatchFailure, ResolutionError, ServiceError
from .models import MoveResult
from .services import MessageMover, SQSService

__all__ = [
    "Config",
    "MessageMover",
    "MoveResult",
    "MoverError",
    "PartialBatchFailure",
    "ResolutionError",
    "SQSService",
    "ServiceError",
]

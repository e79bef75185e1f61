# Copyright 2025 Loopper-AI
# Queue services

from .mover import MessageMover
from .sqs_service import SQSService

__all__ = ["MessageMover", "SQSService"]

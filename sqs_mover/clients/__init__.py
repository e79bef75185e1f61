# Copyright 2025 Loopper-AI
# Client modules for external services

from .aws_session import create_sqs_client

__all__ = ["create_sqs_client"]

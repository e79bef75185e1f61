# Copyright 2025 Loopper-AI
# boto3 session and SQS client creation

from __future__ import annotations

import logging
from typing import Any

import boto3

from ..config import Config

logger = logging.getLogger(__name__)


def create_sqs_client(config: Config) -> Any:
    """SQS client for the configured profile and region.

    Raises botocore ProfileNotFound / BotoCoreError when the session cannot be built.
    """
    session = boto3.session.Session(profile_name=config.profile, region_name=config.region)
    logger.debug("AWS session profile=%s region=%s", config.profile or "<default>", config.region)
    return session.client("sqs")

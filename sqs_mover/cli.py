# Copyright 2025 Loopper-AI
# Command line entry point: resolve queues → move messages → exit code
#
# Exit codes:
#   0 → source drained (or nothing to move)
#   1 → session, resolution, or transfer failure
#   2 → invalid options

from __future__ import annotations

import contextlib
import logging

import click
from botocore.exceptions import BotoCoreError
from tqdm.contrib.logging import logging_redirect_tqdm

from .clients import create_sqs_client
from .config import Config
from .exceptions import MoverError
from .services import MessageMover, SQSService
from .utils import NullReporter, TqdmReporter

logger = logging.getLogger(__name__)

LOG_FORMAT = "%(asctime)s %(levelname)s %(message)s"


def _configure_logging(level: str) -> None:
    logging.basicConfig(format=LOG_FORMAT)
    logging.getLogger().setLevel(getattr(logging, level, logging.INFO))


@click.command("sqs-mover")
@click.option("-s", "--source", help="Source queue to move messages from.")
@click.option("-d", "--destination", help="Destination queue to move messages to.")
@click.option("-p", "--profile", help="AWS profile for source and destination queues.")
@click.option("-r", "--region", help="AWS region for source and destination queues.")
@click.option("--visibility-timeout", type=int, help="Seconds received messages stay hidden while being moved.")
@click.option("--log-level", type=click.Choice(["DEBUG", "INFO", "WARNING", "ERROR"], case_sensitive=False))
@click.option("--no-progress", is_flag=True, default=False, help="Do not render a progress bar.")
@click.pass_context
def main(ctx, source, destination, profile, region, visibility_timeout, log_level, no_progress):
    """Move all messages from one SQS queue to another."""
    config = Config.from_environment().with_overrides(
        source_queue=source,
        destination_queue=destination,
        profile=profile,
        region=region,
        visibility_timeout=visibility_timeout,
        log_level=log_level,
    )
    _configure_logging(config.log_level)

    is_valid, err = config.validate()
    if not is_valid:
        raise click.UsageError(err)

    try:
        service = SQSService(create_sqs_client(config))
    except BotoCoreError as e:
        logger.error("Unable to create AWS session for region %s. Error: %s", config.region, e)
        ctx.exit(1)

    try:
        source_url = service.resolve_queue_url(config.source_queue)
        logger.info("Source queue URL: %s", source_url)
        destination_url = service.resolve_queue_url(config.destination_queue)
        logger.info("Destination queue URL: %s", destination_url)
        approximate_total = service.get_approximate_count(source_url)
    except MoverError as e:
        logger.error("%s", e)
        ctx.exit(1)

    logger.info("Approximate number of messages in the source queue: %d", approximate_total)
    if approximate_total == 0:
        logger.info("Looks like nothing to move. Done.")
        ctx.exit(0)

    reporter = NullReporter() if no_progress else TqdmReporter(approximate_total)
    redirect = contextlib.nullcontext() if no_progress else logging_redirect_tqdm()
    with redirect:
        result = MessageMover(service, config, reporter).move(source_url, destination_url, approximate_total)

    if not result.succeeded:
        click.echo(f"Moved {result.moved_count} messages before failing: {result.error}", err=True)
    ctx.exit(result.exit_code)

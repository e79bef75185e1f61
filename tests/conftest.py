# Copyright 2025 Loopper-AI
# Shared fixtures: in-memory SQS client

from __future__ import annotations

import itertools
from typing import Any

import pytest
from botocore.exceptions import ClientError

QUEUE_URL_PREFIX = "https://sqs.us-east-1.amazonaws.com/123456789012/"


def client_error(operation: str, code: str = "InternalError", message: str = "boom") -> ClientError:
    return ClientError({"Error": {"Code": code, "Message": message}}, operation)


class FakeQueue:
    """Local SQS queue. Received messages stay in flight until deleted."""

    def __init__(self, name: str):
        self.name = name
        self.visible: list[dict[str, str]] = []
        self.in_flight: dict[str, dict[str, str]] = {}
        self._ids = itertools.count(1)

    def put(self, body: str) -> str:
        message_id = f"{self.name}-{next(self._ids):04d}"
        self.visible.append({"MessageId": message_id, "Body": body})
        return message_id

    def take(self, count: int) -> list[dict[str, str]]:
        taken, self.visible = self.visible[:count], self.visible[count:]
        messages = []
        for item in taken:
            receipt_handle = f"rh-{item['MessageId']}"
            self.in_flight[receipt_handle] = item
            messages.append({**item, "ReceiptHandle": receipt_handle})
        return messages

    def delete(self, receipt_handle: str) -> bool:
        return self.in_flight.pop(receipt_handle, None) is not None

    @property
    def bodies(self) -> list[str]:
        return [m["Body"] for m in self.visible] + [m["Body"] for m in self.in_flight.values()]


class FakeSQSClient:
    """Pretend to be a boto3 SQS client.

    Failure injection:
        errors       operation name → exception raised by that call
        fail_send    message bodies reported as Failed by send_message_batch
        fail_delete  message ids reported as Failed by delete_message_batch
        drop_send    message ids left out of both Successful and Failed
    """

    def __init__(self):
        self.queues: dict[str, FakeQueue] = {}
        self.calls: list[tuple[str, dict[str, Any]]] = []
        self.errors: dict[str, Exception] = {}
        self.fail_send: set[str] = set()
        self.fail_delete: set[str] = set()
        self.drop_send: set[str] = set()

    def create_queue(self, name: str, bodies: list[str] | None = None) -> str:
        queue = self.queues.setdefault(name, FakeQueue(name))
        for body in bodies or []:
            queue.put(body)
        return QUEUE_URL_PREFIX + name

    def queue(self, name: str) -> FakeQueue:
        return self.queues[name]

    def operations(self) -> list[str]:
        return [name for name, _ in self.calls]

    def _record(self, operation: str, kwargs: dict[str, Any]) -> None:
        self.calls.append((operation, kwargs))
        if operation in self.errors:
            raise self.errors[operation]

    def _queue_for(self, queue_url: str) -> FakeQueue:
        name = queue_url.split("/")[-1]
        if name not in self.queues:
            raise client_error("SendMessage", "AWS.SimpleQueueService.NonExistentQueue", "The specified queue does not exist.")
        return self.queues[name]

    def get_queue_url(self, **kwargs):
        self._record("GetQueueUrl", kwargs)
        name = kwargs["QueueName"]
        if name not in self.queues:
            raise client_error(
                "GetQueueUrl",
                "AWS.SimpleQueueService.NonExistentQueue",
                "The specified queue does not exist for this wsdl version.",
            )
        return {"QueueUrl": QUEUE_URL_PREFIX + name}

    def get_queue_attributes(self, **kwargs):
        self._record("GetQueueAttributes", kwargs)
        queue = self._queue_for(kwargs["QueueUrl"])
        return {"Attributes": {"ApproximateNumberOfMessages": str(len(queue.visible))}}

    def receive_message(self, **kwargs):
        self._record("ReceiveMessage", kwargs)
        queue = self._queue_for(kwargs["QueueUrl"])
        messages = queue.take(int(kwargs.get("MaxNumberOfMessages", 1)))
        # Real SQS omits the key when nothing is returned
        return {"Messages": messages} if messages else {}

    def send_message_batch(self, **kwargs):
        self._record("SendMessageBatch", kwargs)
        queue = self._queue_for(kwargs["QueueUrl"])
        successful, failed = [], []
        for entry in kwargs["Entries"]:
            if entry["MessageBody"] in self.fail_send:
                failed.append({"Id": entry["Id"], "SenderFault": False, "Code": "InternalError", "Message": "send failed"})
            elif entry["Id"] in self.drop_send:
                continue
            else:
                message_id = queue.put(entry["MessageBody"])
                successful.append({"Id": entry["Id"], "MessageId": message_id})
        response: dict[str, Any] = {"Successful": successful}
        if failed:
            response["Failed"] = failed
        return response

    def delete_message_batch(self, **kwargs):
        self._record("DeleteMessageBatch", kwargs)
        queue = self._queue_for(kwargs["QueueUrl"])
        successful, failed = [], []
        for entry in kwargs["Entries"]:
            if entry["Id"] in self.fail_delete or not queue.delete(entry["ReceiptHandle"]):
                failed.append({"Id": entry["Id"], "SenderFault": True, "Code": "ReceiptHandleIsInvalid", "Message": "invalid"})
            else:
                successful.append({"Id": entry["Id"]})
        response: dict[str, Any] = {"Successful": successful}
        if failed:
            response["Failed"] = failed
        return response


@pytest.fixture
def sqs_client() -> FakeSQSClient:
    return FakeSQSClient()

"""
SSM Run Command client.

Submits a command document to a managed instance, waits a bounded time for
the invocation to finish and reads back its output.
"""

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict, List, Optional

from botocore.exceptions import WaiterError

logger = logging.getLogger(__name__)


class CommandTimeoutError(Exception):
    """Raised when an invocation does not finish within the wait budget."""

    def __init__(self, command_id: str, instance_id: str, max_wait_seconds: int):
        self.command_id = command_id
        self.instance_id = instance_id
        self.max_wait_seconds = max_wait_seconds
        super().__init__(
            f"Command {command_id} on {instance_id} did not finish "
            f"within {max_wait_seconds}s"
        )


class InvocationStatus(str, Enum):
    PENDING = "Pending"
    IN_PROGRESS = "InProgress"
    DELAYED = "Delayed"
    SUCCESS = "Success"
    CANCELLED = "Cancelled"
    CANCELLING = "Cancelling"
    TIMED_OUT = "TimedOut"
    FAILED = "Failed"

    @property
    def is_terminal(self) -> bool:
        # Cancelling ends the command_executed waiter, so it counts here too
        return self not in (
            InvocationStatus.PENDING,
            InvocationStatus.IN_PROGRESS,
            InvocationStatus.DELAYED,
        )


@dataclass
class CommandSubmission:
    command_id: str
    instance_id: str


@dataclass
class CommandInvocation:
    status: InvocationStatus
    stdout: str = ""
    stderr: str = ""

    @property
    def succeeded(self) -> bool:
        return self.status == InvocationStatus.SUCCESS


class RunCommandClient:
    """
    Wraps a boto3 SSM client with the three calls a command invocation needs.
    """

    def __init__(self, ssm_client: Any):
        """
        Args:
            ssm_client: A boto3 client for the "ssm" service.
        """
        self.ssm = ssm_client

    def submit(
        self,
        target_id: str,
        document_name: str,
        parameters: Optional[Dict[str, List[str]]] = None,
    ) -> CommandSubmission:
        """
        Sends a command document to a single instance.

        The Parameters argument is left out entirely when `parameters` is None.
        """
        request: Dict[str, Any] = {
            "InstanceIds": [target_id],
            "DocumentName": document_name,
        }
        if parameters is not None:
            request["Parameters"] = parameters

        response = self.ssm.send_command(**request)
        command = response["Command"]
        submission = CommandSubmission(
            command_id=command["CommandId"],
            instance_id=command["InstanceIds"][0],
        )
        logger.info(
            f"Submitted {document_name} as command {submission.command_id} "
            f"to {submission.instance_id}"
        )
        return submission

    def await_completion(
        self,
        command_id: str,
        instance_id: str,
        max_wait_seconds: int,
        poll_interval_seconds: int = 1,
    ) -> None:
        """
        Blocks until the invocation reaches a terminal state.

        A non-success terminal state returns normally so the caller can read
        the error output.

        Raises:
            CommandTimeoutError: If the wait budget elapses first.
            botocore.exceptions.WaiterError: If polling itself fails.
        """
        max_attempts = max(1, max_wait_seconds // poll_interval_seconds)
        waiter = self.ssm.get_waiter("command_executed")
        try:
            waiter.wait(
                CommandId=command_id,
                InstanceId=instance_id,
                WaiterConfig={
                    "Delay": poll_interval_seconds,
                    "MaxAttempts": max_attempts,
                },
            )
        except WaiterError as e:
            status = _status_of(e.last_response)
            if status is not None and status.is_terminal:
                logger.info(f"Command {command_id} finished with status {status.value}")
                return
            if "Max attempts exceeded" in str(e):
                raise CommandTimeoutError(command_id, instance_id, max_wait_seconds) from e
            raise

    def get_invocation(self, command_id: str, instance_id: str) -> CommandInvocation:
        """Reads the status and output of a finished invocation."""
        response = self.ssm.get_command_invocation(
            CommandId=command_id, InstanceId=instance_id
        )
        return CommandInvocation(
            status=InvocationStatus(response["Status"]),
            stdout=response.get("StandardOutputContent", ""),
            stderr=response.get("StandardErrorContent", ""),
        )


def _status_of(response: Optional[Dict[str, Any]]) -> Optional[InvocationStatus]:
    if not response or "Status" not in response:
        return None
    try:
        return InvocationStatus(response["Status"])
    except ValueError:
        return None

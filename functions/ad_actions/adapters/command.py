"""
Run Command adapter.

Runs the SSM document named by the operation on the AD management instance
and returns its output. Every failure is masked with the generic error body.
"""

import logging
from typing import Dict, List, Optional

from ..clients.run_command import RunCommandClient
from ..config import CommandAdapterConfig
from ..envelope import Parameter
from .base import BaseAdapter

logger = logging.getLogger(__name__)


def to_command_parameters(
    parameters: Optional[List[Parameter]],
) -> Optional[Dict[str, List[str]]]:
    """
    Reshapes function parameters into the SSM parameter map.

    Returns None when no parameters were sent, so the map is omitted rather
    than sent empty.
    """
    if not parameters:
        return None
    return {p.name: [p.value] for p in parameters}


class CommandExecutionAdapter(BaseAdapter):
    """Executes AD runbooks on the management instance via SSM Run Command."""

    action_group = "ExecuteADQuery"

    def __init__(self, client: RunCommandClient, config: CommandAdapterConfig):
        self.client = client
        self.config = config

    def execute(
        self, operation: str, parameters: Optional[List[Parameter]]
    ) -> Optional[str]:
        try:
            submission = self.client.submit(
                target_id=self.config.management_instance_id,
                document_name=operation,
                parameters=to_command_parameters(parameters),
            )
            self.client.await_completion(
                submission.command_id,
                submission.instance_id,
                max_wait_seconds=self.config.wait_seconds,
                poll_interval_seconds=self.config.poll_interval_seconds,
            )
            invocation = self.client.get_invocation(
                submission.command_id, submission.instance_id
            )
        except Exception:
            logger.exception(f"Run Command execution of {operation} failed")
            return None

        if invocation.succeeded:
            return invocation.stdout
        logger.warning(
            f"Command for {operation} ended with status {invocation.status.value}"
        )
        return invocation.stderr

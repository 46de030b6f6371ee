"""
Directory Service Data adapter.

Answers user and group lookups straight from the managed directory. Errors
reported by the service are passed back to the agent as their message text;
anything else is masked with the generic error body.
"""

import json
import logging
from datetime import date, datetime
from typing import Any, Callable, Dict, List, Optional

from ..clients.directory_data import DirectoryDataClient, QueryOutcome, QueryResult
from ..config import DirectoryAdapterConfig
from ..envelope import Parameter, get_parameter
from .base import BaseAdapter

logger = logging.getLogger(__name__)

OperationHandler = Callable[
    [DirectoryDataClient, str, Optional[List[Parameter]]], Optional[QueryResult]
]


def _username(parameters: Optional[List[Parameter]]) -> Optional[str]:
    username = get_parameter(parameters, "username")
    if not username:
        logger.warning("Missing required parameter: username")
    return username or None


def get_all_users(
    client: DirectoryDataClient,
    directory_id: str,
    parameters: Optional[List[Parameter]],
) -> Optional[QueryResult]:
    return client.list_users(directory_id)


def get_user_details(
    client: DirectoryDataClient,
    directory_id: str,
    parameters: Optional[List[Parameter]],
) -> Optional[QueryResult]:
    username = _username(parameters)
    if username is None:
        return None
    return client.describe_user(directory_id, username)


def get_user_groups(
    client: DirectoryDataClient,
    directory_id: str,
    parameters: Optional[List[Parameter]],
) -> Optional[QueryResult]:
    username = _username(parameters)
    if username is None:
        return None
    return client.list_groups_for_member(directory_id, username)


OPERATIONS: Dict[str, OperationHandler] = {
    "AD-GetAllUsers": get_all_users,
    "AD-GetUserDetails": get_user_details,
    "AD-GetUserGroups": get_user_groups,
}


def _json_default(value: Any) -> str:
    if isinstance(value, (datetime, date)):
        return value.isoformat()
    return str(value)


def serialize(value: Any) -> str:
    """Serializes a query result to JSON text; timestamps become ISO-8601."""
    return json.dumps(value, default=_json_default)


class DirectoryDataAdapter(BaseAdapter):
    """Queries the managed directory through the Directory Service Data API."""

    action_group = "ExecuteManagedADDataQuery"

    def __init__(self, client: DirectoryDataClient, config: DirectoryAdapterConfig):
        self.client = client
        self.config = config

    def execute(
        self, operation: str, parameters: Optional[List[Parameter]]
    ) -> Optional[str]:
        handler = OPERATIONS.get(operation)
        if handler is None:
            logger.warning(f"Unsupported directory operation: {operation}")
            return None

        try:
            result = handler(self.client, self.config.directory_id, parameters)
        except Exception:
            logger.exception(f"Directory query {operation} failed")
            return None

        if result is None:
            return None
        if result.outcome == QueryOutcome.SUCCESS:
            return serialize(result.value)
        if result.outcome == QueryOutcome.SERVICE_ERROR:
            return result.message
        raise ValueError(f"Unknown query outcome: {result.outcome}")

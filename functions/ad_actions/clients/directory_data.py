"""
Directory Service Data client.

Every call returns a QueryResult: either the service's answer or the
human-readable message of an error the service reported. Failures that never
reached the service (credentials, connectivity, parameter validation) are
raised.

List lookups follow pagination, so one query may issue several backend calls.
"""

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Any, Callable, Dict, List, Optional

from botocore.exceptions import ClientError

logger = logging.getLogger(__name__)


class QueryOutcome(str, Enum):
    SUCCESS = "success"
    SERVICE_ERROR = "service_error"


@dataclass
class QueryResult:
    outcome: QueryOutcome
    value: Any = None
    message: Optional[str] = None

    @classmethod
    def success(cls, value: Any) -> "QueryResult":
        return cls(outcome=QueryOutcome.SUCCESS, value=value)

    @classmethod
    def service_error(cls, message: str) -> "QueryResult":
        return cls(outcome=QueryOutcome.SERVICE_ERROR, message=message)


class DirectoryDataClient:
    """
    Wraps a boto3 "ds-data" client with the lookups the agent can request.
    """

    def __init__(self, ds_data_client: Any):
        self.ds_data = ds_data_client

    def list_users(self, directory_id: str) -> QueryResult:
        """Lists every user in the directory, following pagination."""
        return self._call(
            lambda: self._collect("list_users", "Users", DirectoryId=directory_id)
        )

    def describe_user(self, directory_id: str, account_name: str) -> QueryResult:
        """Describes a single user by SAM account name."""

        def describe():
            response = self.ds_data.describe_user(
                DirectoryId=directory_id, SAMAccountName=account_name
            )
            return {k: v for k, v in response.items() if k != "ResponseMetadata"}

        return self._call(describe)

    def list_groups_for_member(
        self, directory_id: str, account_name: str
    ) -> QueryResult:
        """Lists every group the account is a member of."""
        return self._call(
            lambda: self._collect(
                "list_groups_for_member",
                "Groups",
                DirectoryId=directory_id,
                SAMAccountName=account_name,
            )
        )

    def _collect(self, operation: str, key: str, **kwargs) -> List[Dict[str, Any]]:
        paginator = self.ds_data.get_paginator(operation)
        items: List[Dict[str, Any]] = []
        for page in paginator.paginate(**kwargs):
            items.extend(page.get(key, []))
        return items

    def _call(self, fn: Callable[[], Any]) -> QueryResult:
        try:
            return QueryResult.success(fn())
        except ClientError as e:
            error = e.response.get("Error", {})
            logger.warning(
                f"Directory Service Data error {error.get('Code')}: {error.get('Message')}"
            )
            return QueryResult.service_error(error.get("Message") or str(e))

"""
Thin wrappers over the boto3 clients the action group handlers call.
"""

from .run_command import (
    CommandInvocation,
    CommandSubmission,
    CommandTimeoutError,
    InvocationStatus,
    RunCommandClient,
)
from .directory_data import DirectoryDataClient, QueryOutcome, QueryResult

__all__ = [
    "CommandInvocation",
    "CommandSubmission",
    "CommandTimeoutError",
    "InvocationStatus",
    "RunCommandClient",
    "DirectoryDataClient",
    "QueryOutcome",
    "QueryResult",
]

"""
AWS Lambda entry points for the two action groups.

Each warm container builds its adapter once, on the first invocation.
"""

import logging
from typing import Any, Dict, Optional

import boto3

from .adapters import CommandExecutionAdapter, DirectoryDataAdapter
from .clients import DirectoryDataClient, RunCommandClient
from .config import CommandAdapterConfig, Config, DirectoryAdapterConfig
from .logging_config import setup_logging

# Apply the JSON logging configuration at the earliest point
setup_logging()

_command_adapter: Optional[CommandExecutionAdapter] = None
_directory_adapter: Optional[DirectoryDataAdapter] = None


def build_command_adapter() -> CommandExecutionAdapter:
    config = CommandAdapterConfig.from_env()
    ssm = boto3.client("ssm", region_name=Config.get_aws_region())
    return CommandExecutionAdapter(RunCommandClient(ssm), config)


def build_directory_adapter() -> DirectoryDataAdapter:
    config = DirectoryAdapterConfig.from_env()
    ds_data = boto3.client("ds-data", region_name=Config.get_aws_region())
    return DirectoryDataAdapter(DirectoryDataClient(ds_data), config)


def _get_command_adapter() -> CommandExecutionAdapter:
    global _command_adapter
    if _command_adapter is None:
        logging.info("Initializing Run Command adapter")
        _command_adapter = build_command_adapter()
    return _command_adapter


def _get_directory_adapter() -> DirectoryDataAdapter:
    global _directory_adapter
    if _directory_adapter is None:
        logging.info("Initializing Directory Service Data adapter")
        _directory_adapter = build_directory_adapter()
    return _directory_adapter


def execute_ad_query(event: Dict[str, Any], context: Any) -> Dict[str, Any]:
    """Handler for the ExecuteADQuery action group."""
    return _get_command_adapter().handle(event)


def execute_managed_ad_data_query(event: Dict[str, Any], context: Any) -> Dict[str, Any]:
    """Handler for the ExecuteManagedADDataQuery action group."""
    return _get_directory_adapter().handle(event)

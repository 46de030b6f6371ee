import logging
import os
from unittest.mock import MagicMock

import pytest

from ad_actions.clients import DirectoryDataClient, RunCommandClient
from ad_actions.config import CommandAdapterConfig, DirectoryAdapterConfig


@pytest.fixture(scope="session", autouse=True)
def configure_test_logging():
    """
    Configure logging for tests based on environment variables.
    This is automatically applied to all tests.
    """
    log_level_name = os.environ.get("LOG_LEVEL", "INFO").upper()
    log_level = getattr(logging, log_level_name, logging.INFO)

    logging.getLogger().setLevel(log_level)

    if log_level == logging.ERROR:
        for logger_name in ["botocore", "urllib3", "httpx"]:
            logging.getLogger(logger_name).setLevel(logging.ERROR)


@pytest.fixture
def ssm_client():
    """A stand-in for the boto3 SSM client."""
    client = MagicMock()
    client.send_command.return_value = {
        "Command": {"CommandId": "cmd-001", "InstanceIds": ["i-0abc"]}
    }
    client.get_command_invocation.return_value = {
        "Status": "Success",
        "StandardOutputContent": "user1\nuser2",
        "StandardErrorContent": "",
    }
    return client


@pytest.fixture
def run_command_client(ssm_client):
    return RunCommandClient(ssm_client)


@pytest.fixture
def command_config():
    return CommandAdapterConfig(management_instance_id="i-0abc")


@pytest.fixture
def ds_data_client():
    """A stand-in for the boto3 Directory Service Data client."""
    return MagicMock()


@pytest.fixture
def directory_data_client(ds_data_client):
    return DirectoryDataClient(ds_data_client)


@pytest.fixture
def directory_config():
    return DirectoryAdapterConfig(directory_id="d-1234567890")
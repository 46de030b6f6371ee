"""
Tests for the Directory Service Data client.
"""

import pytest
from botocore.exceptions import EndpointConnectionError

from ad_actions.clients import QueryOutcome
from helpers import client_error, paginate_returns


class TestDirectoryDataClient:
    def test_list_users_follows_pages(self, directory_data_client, ds_data_client):
        paginate_returns(
            ds_data_client,
            [
                {"Users": [{"SAMAccountName": "jdoe"}], "NextToken": "t1"},
                {"Users": [{"SAMAccountName": "asmith"}]},
            ],
        )

        result = directory_data_client.list_users("d-1234567890")

        ds_data_client.get_paginator.assert_called_once_with("list_users")
        ds_data_client.get_paginator.return_value.paginate.assert_called_once_with(
            DirectoryId="d-1234567890"
        )
        assert result.outcome == QueryOutcome.SUCCESS
        assert result.value == [{"SAMAccountName": "jdoe"}, {"SAMAccountName": "asmith"}]

    def test_describe_user_strips_response_metadata(
        self, directory_data_client, ds_data_client
    ):
        ds_data_client.describe_user.return_value = {
            "DirectoryId": "d-1234567890",
            "SAMAccountName": "jdoe",
            "Enabled": True,
            "ResponseMetadata": {"HTTPStatusCode": 200},
        }

        result = directory_data_client.describe_user("d-1234567890", "jdoe")

        ds_data_client.describe_user.assert_called_once_with(
            DirectoryId="d-1234567890", SAMAccountName="jdoe"
        )
        assert result.value == {
            "DirectoryId": "d-1234567890",
            "SAMAccountName": "jdoe",
            "Enabled": True,
        }

    def test_list_groups_for_member(self, directory_data_client, ds_data_client):
        paginate_returns(ds_data_client, [{"Groups": [{"SAMAccountName": "Admins"}]}])

        result = directory_data_client.list_groups_for_member("d-1234567890", "jdoe")

        ds_data_client.get_paginator.assert_called_once_with("list_groups_for_member")
        ds_data_client.get_paginator.return_value.paginate.assert_called_once_with(
            DirectoryId="d-1234567890", SAMAccountName="jdoe"
        )
        assert result.value == [{"SAMAccountName": "Admins"}]

    def test_empty_page(self, directory_data_client, ds_data_client):
        paginate_returns(ds_data_client, [{}])

        result = directory_data_client.list_users("d-1234567890")

        assert result.value == []

    def test_service_error_becomes_result(self, directory_data_client, ds_data_client):
        ds_data_client.describe_user.side_effect = client_error(
            "ResourceNotFoundException", "User not found"
        )

        result = directory_data_client.describe_user("d-1234567890", "ghost")

        assert result.outcome == QueryOutcome.SERVICE_ERROR
        assert result.message == "User not found"
        assert result.value is None

    def test_transport_error_is_raised(self, directory_data_client, ds_data_client):
        ds_data_client.describe_user.side_effect = EndpointConnectionError(
            endpoint_url="https://ds-data.us-east-1.amazonaws.com"
        )

        with pytest.raises(EndpointConnectionError):
            directory_data_client.describe_user("d-1234567890", "jdoe")

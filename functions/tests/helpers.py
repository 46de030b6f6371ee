"""Shared builders for test events and backend responses."""

from botocore.exceptions import ClientError


def make_event(function, parameters=None, action_group="ExecuteADQuery"):
    """Builds a request envelope as the agent runtime sends it."""
    event = {
        "messageVersion": "1.0",
        "agent": {
            "name": "ADAgent",
            "id": "AGENT123",
            "alias": "TSTALIASID",
            "version": "DRAFT",
        },
        "inputText": "Who are the users in the directory?",
        "sessionId": "session-42",
        "actionGroup": action_group,
        "function": function,
        "sessionAttributes": {"tenant": "example"},
        "promptSessionAttributes": {"turn": "3"},
    }
    if parameters is not None:
        event["parameters"] = [
            {"name": name, "type": "string", "value": value}
            for name, value in parameters.items()
        ]
    return event


def paginate_returns(ds_data_client, pages):
    """Makes every paginator on the stand-in client yield `pages`."""
    ds_data_client.get_paginator.return_value.paginate.return_value = pages


def client_error(code, message, operation="DescribeUser"):
    return ClientError({"Error": {"Code": code, "Message": message}}, operation)

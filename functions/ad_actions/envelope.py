"""
Request and response envelopes exchanged with the Bedrock agent runtime.

The agent invokes an action group with a request envelope naming the
function to run and its parameters. Every handler answers with a response
envelope that echoes the identifiers back and carries a single text body.
"""

from enum import Enum
from typing import Any, Dict, List, Mapping, Optional

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

TEXT_CONTENT_TYPE = "TEXT"
ERROR_BODY = "There was an error"


class EnvelopeModel(BaseModel):
    """Base model accepting both camelCase and snake_case field names."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class ResponseState(str, Enum):
    """Optional markers the agent runtime accepts on a function response."""

    FAILURE = "FAILURE"
    REPROMPT = "REPROMPT"


class Agent(EnvelopeModel):
    name: str
    id: str
    alias: str
    version: str


class Parameter(EnvelopeModel):
    """A named function parameter. Values always arrive as strings."""

    name: str
    type: str = "string"
    value: str


class RequestEnvelope(EnvelopeModel):
    message_version: str
    agent: Agent
    input_text: str = ""
    session_id: str
    action_group: str
    function: str
    parameters: Optional[List[Parameter]] = None
    session_attributes: Dict[str, str] = Field(default_factory=dict)
    prompt_session_attributes: Dict[str, str] = Field(default_factory=dict)


class FunctionContent(EnvelopeModel):
    body: str


class FunctionResponse(EnvelopeModel):
    response_state: Optional[ResponseState] = None
    response_body: Dict[str, FunctionContent]


class ActionResponse(EnvelopeModel):
    action_group: str
    function: str
    function_response: FunctionResponse


class ResponseEnvelope(EnvelopeModel):
    message_version: str
    response: ActionResponse
    session_attributes: Dict[str, str] = Field(default_factory=dict)
    prompt_session_attributes: Dict[str, str] = Field(default_factory=dict)

    @property
    def body(self) -> str:
        """The text body of the function response."""
        return self.response.function_response.response_body[TEXT_CONTENT_TYPE].body

    def to_event(self) -> Dict[str, Any]:
        """Dump to the plain dict shape the agent runtime expects."""
        return self.model_dump(by_alias=True, exclude_none=True, mode="json")


def decode(event: Mapping[str, Any]) -> RequestEnvelope:
    """
    Extracts a request envelope from a raw invocation event.

    Only the structural shape is checked.

    Raises:
        pydantic.ValidationError: If the event is not an envelope.
    """
    return RequestEnvelope.model_validate(event)


def encode(
    action_group: str,
    function: str,
    body: str,
    session_attributes: Optional[Dict[str, str]] = None,
    prompt_session_attributes: Optional[Dict[str, str]] = None,
    message_version: str = "1.0",
    response_state: Optional[ResponseState] = None,
) -> ResponseEnvelope:
    """Wraps a text body in a response envelope under the TEXT content type."""
    return ResponseEnvelope(
        message_version=message_version,
        response=ActionResponse(
            action_group=action_group,
            function=function,
            function_response=FunctionResponse(
                response_state=response_state,
                response_body={TEXT_CONTENT_TYPE: FunctionContent(body=body)},
            ),
        ),
        session_attributes=dict(session_attributes or {}),
        prompt_session_attributes=dict(prompt_session_attributes or {}),
    )


def get_parameter(
    parameters: Optional[List[Parameter]], name: str
) -> Optional[str]:
    """Returns the value of the first parameter called `name`, or None."""
    for parameter in parameters or []:
        if parameter.name == name:
            return parameter.value
    return None

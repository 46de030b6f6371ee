import logging
from abc import ABC, abstractmethod
from typing import Any, Dict, List, Mapping, Optional

from ..envelope import ERROR_BODY, Parameter, decode, encode

logger = logging.getLogger(__name__)


class BaseAdapter(ABC):
    """
    An abstract base class for all action group adapters.

    Subclasses implement `execute`, which returns the text body for an
    operation or None when there is nothing to report. `handle` owns the
    envelope round trip and guarantees a well-formed response for every
    structurally valid request.
    """

    action_group: str = ""

    @abstractmethod
    def execute(
        self, operation: str, parameters: Optional[List[Parameter]]
    ) -> Optional[str]:
        """
        Runs one operation against the backend.

        Args:
            operation: The function name sent by the agent.
            parameters: The function parameters, or None if none were sent.

        Returns:
            The response body text, or None to report the generic error.
        """

    def handle(self, event: Mapping[str, Any]) -> Dict[str, Any]:
        """
        Decodes a request envelope, runs the operation and encodes the reply.

        Raises:
            pydantic.ValidationError: If the event is not a request envelope.
        """
        request = decode(event)
        logger.info(
            f"{type(self).__name__}: {request.action_group}/{request.function} "
            f"for session {request.session_id}"
        )

        try:
            body = self.execute(request.function, request.parameters)
        except Exception:
            logger.exception(f"Unhandled error while executing {request.function}")
            body = None

        response = encode(
            action_group=request.action_group,
            function=request.function,
            body=body if body is not None else ERROR_BODY,
            session_attributes=request.session_attributes,
            prompt_session_attributes=request.prompt_session_attributes,
            message_version=request.message_version,
        )
        return response.to_event()

import logging
import time
from typing import Any, Dict, List, Mapping

from fastapi import APIRouter, HTTPException, Path

from .adapters import BaseAdapter
from .envelope import RequestEnvelope
from .schema import ACTION_GROUP_SCHEMAS


def create_api_routes(adapters: Mapping[str, BaseAdapter]) -> APIRouter:
    """
    Creates and returns the API router, wiring up the endpoints
    to the configured action group adapters.
    """
    router = APIRouter(prefix="/api/v1")

    @router.get("/action-groups/manifest")
    def get_action_group_manifest() -> List[Dict[str, Any]]:
        """
        Returns the function schema of every configured action group.
        """
        return [
            ACTION_GROUP_SCHEMAS[name]
            for name in adapters
            if name in ACTION_GROUP_SCHEMAS
        ]

    # Must stay sync: the Run Command wait blocks its worker thread.
    @router.post("/action-groups/{action_group}/invoke")
    def invoke_action_group(
        request: RequestEnvelope,
        action_group: str = Path(..., title="The action group to invoke"),
    ) -> Dict[str, Any]:
        """
        Runs one agent function call and returns the response envelope.
        """
        adapter = adapters.get(action_group)
        if adapter is None:
            raise HTTPException(
                status_code=404, detail=f"Unknown action group: {action_group}"
            )
        if request.action_group != action_group:
            logging.warning(
                f"Envelope names action group {request.action_group} "
                f"but was sent to {action_group}"
            )
        start_time = time.time()
        response = adapter.handle(request.model_dump(by_alias=True))
        logging.info(
            f"Invoked {action_group}/{request.function}",
            extra={
                "action_group": action_group,
                "function": request.function,
                "session_id": request.session_id,
                "duration_ms": round((time.time() - start_time) * 1000, 1),
            },
        )
        return response

    return router

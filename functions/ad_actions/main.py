import logging
from typing import Dict, Optional

from fastapi import FastAPI

from . import __version__
from .adapters import BaseAdapter
from .api import create_api_routes
from .handlers import build_command_adapter, build_directory_adapter
from .logging_config import setup_logging

# Apply the JSON logging configuration at the earliest point
setup_logging()


def build_adapters() -> Dict[str, BaseAdapter]:
    """
    Builds an adapter for every action group whose configuration is present.
    An action group that is not configured is skipped, not fatal.
    """
    adapters: Dict[str, BaseAdapter] = {}
    for builder in (build_command_adapter, build_directory_adapter):
        try:
            adapter = builder()
        except ValueError as e:
            logging.warning(f"Skipping action group: {e}")
            continue
        adapters[adapter.action_group] = adapter
        logging.info(f"Configured action group {adapter.action_group}")
    return adapters


def create_app(adapters: Optional[Dict[str, BaseAdapter]] = None) -> FastAPI:
    if adapters is None:
        adapters = build_adapters()

    app = FastAPI(
        title="AD Agent Action Groups",
        description="Local invocation surface for the Active Directory action groups.",
        version=__version__,
        docs_url="/api/docs",
        redoc_url="/api/redoc",
    )
    app.include_router(create_api_routes(adapters))

    @app.get("/health")
    def health_check():
        """Health check endpoint for container orchestration."""
        return {"status": "healthy", "action_groups": sorted(adapters)}

    return app


if __name__ == "__main__":
    import uvicorn

    logging.info("--- AD Agent Action Groups Starting Up ---")
    uvicorn.run(create_app(), host="0.0.0.0", port=8000)

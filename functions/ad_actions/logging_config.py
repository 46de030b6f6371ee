import logging
import os
import sys
from typing import Any, Dict, Optional

from pythonjsonlogger import jsonlogger

SERVICE_NAME = "ad-agent-actions"


def _static_fields() -> Dict[str, Any]:
    fields: Dict[str, Any] = {"service": SERVICE_NAME}
    function_name = os.environ.get("AWS_LAMBDA_FUNCTION_NAME")
    if function_name:
        fields["lambda_function"] = function_name
    return fields


def build_formatter() -> jsonlogger.JsonFormatter:
    """JSON formatter tagging every record with the service and Lambda name."""
    return jsonlogger.JsonFormatter(
        "%(asctime)s %(name)s %(levelname)s %(message)s",
        rename_fields={"levelname": "level"},
        static_fields=_static_fields(),
    )


def setup_logging(log: Optional[logging.Logger] = None):
    """
    Configures the root logger (or `log`) to output structured JSON logs.
    Log level can be set via the LOG_LEVEL environment variable.

    Inside Lambda the runtime has already attached a handler that ships to
    CloudWatch, so that handler is switched to JSON instead of adding a
    second one. Elsewhere a stdout handler is added once.
    """
    log_level_name = os.environ.get("LOG_LEVEL", "INFO").upper()
    log_level = getattr(logging, log_level_name, logging.INFO)

    if log is None:
        log = logging.getLogger()
    log.setLevel(log_level)

    formatter = build_formatter()

    if os.environ.get("AWS_LAMBDA_FUNCTION_NAME") and log.handlers:
        for handler in log.handlers:
            handler.setFormatter(formatter)
        return

    if not log.handlers:
        handler = logging.StreamHandler(sys.stdout)
        handler.setFormatter(formatter)
        log.addHandler(handler)

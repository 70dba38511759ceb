"""structlog setup shared by the CLI, the Gradio app and the library code."""
from __future__ import annotations

import logging
import sys
from typing import List, Optional

import structlog

LOGGER_NAMESPACE = "values_schema"


class LoggingConfig:
    """Configures structlog on top of the stdlib logging factory (idempotent)."""

    def __init__(self) -> None:
        self.configured = False
        self.handler: Optional[logging.Handler] = None

    def configure(self, debug: Optional[bool] = None) -> None:
        if not self.configured:
            structlog.configure(
                processors=self._processors(),
                context_class=dict,
                logger_factory=structlog.stdlib.LoggerFactory(),
                wrapper_class=structlog.stdlib.BoundLogger,
                cache_logger_on_first_use=True,
            )
            self.handler = logging.StreamHandler(sys.stderr)
            self.handler.setFormatter(logging.Formatter("%(message)s"))
            namespace_logger = logging.getLogger(LOGGER_NAMESPACE)
            namespace_logger.addHandler(self.handler)
            namespace_logger.setLevel(logging.INFO)
            namespace_logger.propagate = False
            self.configured = True

        if debug is not None:
            logging.getLogger(LOGGER_NAMESPACE).setLevel(logging.DEBUG if debug else logging.INFO)

    @staticmethod
    def _processors() -> List[structlog.types.Processor]:
        processors: List[structlog.types.Processor] = [
            structlog.stdlib.filter_by_level,
            structlog.stdlib.add_logger_name,
            structlog.stdlib.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
        ]
        if sys.stderr.isatty():
            processors.append(structlog.dev.ConsoleRenderer(colors=True))
        else:
            processors.append(structlog.processors.JSONRenderer())
        return processors


logging_config = LoggingConfig()


def configure_logging(debug: bool = False) -> None:
    """Route structlog through stdlib logging; DEBUG when ``debug`` is set."""
    logging_config.configure(debug=debug)


def get_logger(name: str) -> structlog.stdlib.BoundLogger:
    logging_config.configure()
    return structlog.get_logger(name)

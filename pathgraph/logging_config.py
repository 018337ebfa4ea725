"""structlog rendering for the pathgraph command line.

The library only emits standard ``logging`` records under the ``pathgraph``
logger. The command line attaches one stderr handler that renders them with
structlog, as colored console lines or, with ``--log-json``, as JSON lines
carrying a timestamp.
"""

import logging
import sys
from typing import List

import structlog

PACKAGE_LOGGER = "pathgraph"


def _renderer(log_json: bool) -> structlog.types.Processor:
    if log_json:
        return structlog.processors.JSONRenderer()
    return structlog.dev.ConsoleRenderer(colors=sys.stderr.isatty())


def configure_logging(verbose: bool = False, log_json: bool = False) -> None:
    """Route pathgraph log records to stderr.

    Args:
        verbose: Show the debug records of loading, mutation and search.
            Otherwise only warnings and errors are shown.
        log_json: Render JSON lines instead of console lines.
    """
    pre_chain: List[structlog.types.Processor] = [
        structlog.stdlib.add_log_level,
        structlog.stdlib.add_logger_name,
    ]
    if log_json:
        pre_chain.append(structlog.processors.TimeStamper(fmt="iso"))
        pre_chain.append(structlog.processors.format_exc_info)

    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(
        structlog.stdlib.ProcessorFormatter(
            foreign_pre_chain=pre_chain,
            processors=[
                structlog.stdlib.ProcessorFormatter.remove_processors_meta,
                _renderer(log_json),
            ],
        )
    )

    root_logger = logging.getLogger()
    root_logger.handlers.clear()
    root_logger.addHandler(handler)
    root_logger.setLevel(logging.WARNING)

    logging.getLogger(PACKAGE_LOGGER).setLevel(logging.DEBUG if verbose else logging.WARNING)
    logging.getLogger("matplotlib").setLevel(logging.WARNING)

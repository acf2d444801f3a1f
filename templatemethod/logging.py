"""
structlog setup for the package.

Every event is rendered to stderr so that stdout carries nothing but
what the steps print. Call `setup_logging()` once per process; the
package does it on import when the host application has not.
"""

import sys

import structlog


def _stderr_logger_factory(*args) -> structlog.PrintLogger:
    # sys.stderr is looked up per logger so redirected streams are honoured.
    return structlog.PrintLogger(file=sys.stderr)


def _renderer(json_output: bool):
    if json_output:
        return structlog.processors.JSONRenderer()
    return structlog.dev.ConsoleRenderer(colors=False)


def setup_logging(level: int = 30, json_output: bool = False) -> None:
    """
    Route structlog events at or above `level` to stderr.

    Args:
        level: Numeric threshold, as in the stdlib (30 = WARNING).
        json_output: One JSON object per line instead of console text.
    """
    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.processors.add_log_level,
            structlog.processors.StackInfoRenderer(),
            structlog.dev.set_exc_info,
            structlog.processors.TimeStamper(fmt="iso"),
            _renderer(json_output),
        ],
        wrapper_class=structlog.make_filtering_bound_logger(level),
        context_class=dict,
        logger_factory=_stderr_logger_factory,
        cache_logger_on_first_use=False,
    )

"""Structured logging via structlog.

Configures structlog once per process. Library modules keep using
`logging.getLogger(__name__)`; a root handler with structlog's
`ProcessorFormatter` runs those records through the same processors and
renderer as native structlog events.

Renderer selection:
  debug=True  — `ConsoleRenderer` with colours for local runs.
  debug=False — `JSONRenderer` for machine-parseable logs in CI.

ContextVar injection:
  While an archive is being built, `bind_package()` stores "name version"
  in `_package_var`. `_inject_context_vars` copies it into every event,
  stdlib or structlog, so output from consecutive builds stays attributable.
"""

from __future__ import annotations

import logging
import sys
from collections.abc import Iterator
from contextlib import contextmanager
from contextvars import ContextVar

import structlog

HANDLER_NAME = "archiver"

_package_var: ContextVar[str] = ContextVar("package", default="")
_configured = False


def get_package() -> str:
    """Return the package currently being archived, or empty string if none."""
    return _package_var.get()


@contextmanager
def bind_package(name: str, version: str) -> Iterator[str]:
    """Bind the package being archived for the duration of the block."""
    label = f"{name} {version}".strip()
    token = _package_var.set(label)
    try:
        yield label
    finally:
        _package_var.reset(token)


def _inject_context_vars(
    logger: logging.Logger,
    method: str,
    event_dict: dict,
) -> dict:
    """Structlog processor: inject the bound package from the ContextVar."""
    package = get_package()
    if package:
        event_dict["package"] = package
    return event_dict


def configure_structlog(debug: bool = False) -> None:
    """Configure structlog and the stdlib bridge.

    Calling multiple times is safe — the root handler is installed once and
    only its formatter and level are refreshed.
    """
    shared_processors: list = [
        structlog.stdlib.add_log_level,
        structlog.processors.TimeStamper(fmt="iso"),
        _inject_context_vars,
        structlog.processors.StackInfoRenderer(),
        structlog.processors.format_exc_info,
    ]

    if debug:
        renderer = structlog.dev.ConsoleRenderer()
    else:
        renderer = structlog.processors.JSONRenderer()

    structlog.configure(
        processors=shared_processors + [renderer],
        wrapper_class=structlog.make_filtering_bound_logger(logging.DEBUG),
        context_class=dict,
        logger_factory=structlog.WriteLoggerFactory(file=sys.stdout),
        cache_logger_on_first_use=True,
    )

    # Bridge stdlib logging so archiver modules, httpx and google-cloud-storage
    # are rendered by the same processors.
    formatter = structlog.stdlib.ProcessorFormatter(
        foreign_pre_chain=shared_processors,
        processors=[
            structlog.stdlib.ProcessorFormatter.remove_processors_meta,
            renderer,
        ],
    )
    root = logging.getLogger()
    handler = next((h for h in root.handlers if h.get_name() == HANDLER_NAME), None)
    if handler is None:
        handler = logging.StreamHandler(sys.stdout)
        handler.set_name(HANDLER_NAME)
        root.addHandler(handler)
    handler.setFormatter(formatter)
    root.setLevel(logging.DEBUG if debug else logging.INFO)


def configure_logging(debug: bool = False) -> bool:
    """Configure logging the first time it is called; later calls are no-ops.

    Returns True when this call did the configuration.
    """
    global _configured
    if _configured:
        return False
    configure_structlog(debug=debug)
    _configured = True
    return True

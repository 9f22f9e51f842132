"""errchain - annotated errors with captured stacks, state and cause chains.

Quick Start:
    >>> from errchain import BaseError, new, wrap, get_message
    >>> err = wrap(new("disk full"), "saving report").set_state({"path": "/tmp/r"})
    >>> try:
    ...     raise err
    ... except BaseError as e:
    ...     get_message(e)
    'saving report disk full'
    >>> err.get_annotated_states()[0]["path"]
    '/tmp/r'

str() of an annotated error is the full diagnostic report: every message and
state line in the chain followed by the innermost captured stack.
"""

from __future__ import annotations

__version__ = "0.1.0"

from .chain import (
    NON_ERROR_MESSAGE,
    annotated_states,
    build_report,
    default_error,
    get_message,
    has_inner,
    iter_chain,
)
from .config import ErrchainSettings, clear_settings_cache, get_settings
from .errors import BaseError, new, newf, wrap, wrapf
from .stack import capture_stack, stack_trace
from .text import NOT_FOUND, TOO_FEW, index_nth
from .types import AnnotatedError, ErrorReport, ReportEntry, State

__all__ = [
    # Errors
    "AnnotatedError", "BaseError", "State",
    "new", "newf", "wrap", "wrapf",
    # Chain
    "iter_chain", "get_message", "has_inner", "annotated_states",
    "build_report", "default_error", "ErrorReport", "ReportEntry", "NON_ERROR_MESSAGE",
    # Stack & text
    "capture_stack", "stack_trace", "index_nth", "NOT_FOUND", "TOO_FEW",
    # Config
    "ErrchainSettings", "get_settings", "clear_settings_cache",
]

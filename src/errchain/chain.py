"""Walk chains of nested errors and aggregate what they carry.

All functions here are read-only: they accept any error (annotated or not),
follow get_inner() links outermost first, and treat the first foreign error as
the end of the chain.
"""

from __future__ import annotations

import logging
from collections.abc import Iterator

import orjson

from errchain.config import get_settings
from errchain.text import index_nth
from errchain.types import AnnotatedError, ErrorReport, ReportEntry, State

logger = logging.getLogger("errchain.chain")

NON_ERROR_MESSAGE = "Passed a non-error to get_message"


def iter_chain(err: BaseException | None) -> Iterator[BaseException]:
    """Yield err and its transitive inner errors, outermost first.

    Chains must be acyclic; a cycle makes this loop forever.
    """
    node = err
    while node is not None:
        yield node
        if not isinstance(node, AnnotatedError):
            return
        node = node.get_inner()


def get_message(value: object) -> str:
    """Messages of the whole chain joined by spaces, without stack traces.

    Safe to call on anything: non-errors yield a fixed diagnostic string.
    """
    if isinstance(value, AnnotatedError):
        return " ".join(
            node.get_message() if isinstance(node, AnnotatedError) else str(node)
            for node in iter_chain(value)
        )
    if isinstance(value, BaseException):
        return str(value)
    return NON_ERROR_MESSAGE


def has_inner(err: BaseException, target: BaseException) -> bool:
    """Whether target is err itself or one of its transitive inner errors."""
    return any(node is target for node in iter_chain(err))


def location(stack: str) -> str:
    """Location line of the first captured frame (third line of the stack)."""
    if (end := index_nth(stack, "\n", 3)) >= 0:
        stack = stack[:end]
    return stack[stack.rfind("\n") + 1:].strip()


def annotated_states(err: BaseException) -> list[State]:
    """Per-node state copies with `_location` and `_message` added, outermost first."""
    out: list[State] = []
    for node in iter_chain(err):
        if isinstance(node, AnnotatedError):
            state = dict(node.get_state() or {})
            state["_location"] = location(node.get_stack())
            state["_message"] = node.get_message()
        else:
            state = {"_message": str(node)}
        out.append(state)
    return out


def encode_state(state: State | None) -> str:
    """Compact JSON for a state line; the encoder's error text if it cannot be encoded."""
    option = orjson.OPT_SORT_KEYS if get_settings().render.sort_keys else None
    try:
        return orjson.dumps(state, option=option).decode()
    except orjson.JSONEncodeError as e:
        logger.debug("state not serializable, rendering error text instead: %s", e)
        return str(e)


def build_report(err: BaseException) -> ErrorReport:
    """Collect messages and state lines for the chain and keep the innermost stack."""
    entries: list[ReportEntry] = []
    original_stack = ""
    for node in iter_chain(err):
        if isinstance(node, AnnotatedError):
            entries.append(ReportEntry.model_construct(
                message=node.get_message(),
                state=encode_state(node.get_state()),
            ))
            original_stack = node.get_stack()
        else:
            entries.append(ReportEntry.model_construct(message=str(node), state=None))
    return ErrorReport.model_construct(entries=tuple(entries), original_stack=original_stack)


def default_error(err: BaseException) -> str:
    """Default rendering for AnnotatedError.error().

    ERROR:
    <message>
    <state json>
    ...

    ORIGINAL STACK TRACE:
    <stack of the innermost annotated error>
    """
    return build_report(err).render()

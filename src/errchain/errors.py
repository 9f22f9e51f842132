"""Annotated errors with stack capture.

Create errors with new/newf and wrap existing ones with wrap/wrapf. Each call
records the stack of its caller; wrapping keeps the inner error reachable
through get_inner() and as __cause__.

Example:
    >>> from errchain import new, wrap, get_message
    >>> err = wrap(new("connection refused"), "loading user")
    >>> get_message(err)
    'loading user connection refused'

Custom error types subclass BaseError and capture the stack in their own
factory by calling stack_trace() directly from the factory body:

    >>> class DatabaseError(BaseError): ...
    >>> def new_database_error(msg: str) -> DatabaseError:
    ...     stack, context = stack_trace()
    ...     return DatabaseError(msg, stack, context)
"""

from __future__ import annotations

import logging
from typing import Any, Self

from errchain.chain import annotated_states, default_error, has_inner
from errchain.stack import stack_trace
from errchain.types import AnnotatedError, State

logger = logging.getLogger("errchain.errors")


class BaseError(AnnotatedError):
    """Standard annotated error: message, captured stack, state and optional inner error.

    Attributes:
        message: Error message, without stack or inner messages
        stack: Captured frames of the creating caller
        context: Stack text trailing the captured frames
        state: Free-form key/value state, None until set
        inner: Wrapped error, if any
    """

    def __init__(
        self,
        message: str,
        stack: str = "",
        context: str = "",
        inner: BaseException | None = None,
        *,
        state: State | None = None,
    ) -> None:
        super().__init__(message)
        self._message = message
        self._stack = stack
        self._context = context
        self._inner = inner
        self._state = state
        if inner is not None:
            self.__cause__ = inner

    @property
    def message(self) -> str:
        return self._message

    @property
    def stack(self) -> str:
        return self._stack

    @property
    def context(self) -> str:
        return self._context

    @property
    def inner(self) -> BaseException | None:
        return self._inner

    @property
    def state(self) -> State | None:
        return self._state

    def get_message(self) -> str:
        return self._message

    def get_stack(self) -> str:
        return self._stack

    def get_context(self) -> str:
        return self._context

    def get_inner(self) -> BaseException | None:
        return self._inner

    def has_inner(self, target: BaseException) -> bool:
        return has_inner(self, target)

    def set_state(self, state: State | None) -> Self:
        self._state = state
        return self

    def get_state(self) -> State | None:
        return self._state

    def get_annotated_states(self) -> list[State]:
        return annotated_states(self)

    def error(self) -> str:
        return default_error(self)

    def __str__(self) -> str:
        return self.error()

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._message!r})"


def _format(fmt: str, args: tuple[Any, ...]) -> str:
    """Interpolate args into fmt; a mismatched format keeps both as text instead of raising."""
    if not args:
        return fmt
    try:
        return fmt % args
    except (TypeError, ValueError, KeyError) as e:
        logger.debug("format %r does not match args %r: %s", fmt, args, e)
        return f"{fmt} {args!r}"


def new(message: str) -> BaseError:
    """New error with the given message and the caller's stack."""
    stack, context = stack_trace()
    return BaseError(message, stack, context)


def newf(fmt: str, *args: Any) -> BaseError:
    """Same as new, with %-style formatting."""
    stack, context = stack_trace()
    return BaseError(_format(fmt, args), stack, context)


def wrap(err: BaseException | None, message: str) -> BaseError:
    """Wrap err in a new error carrying the caller's stack."""
    stack, context = stack_trace()
    return BaseError(message, stack, context, err)


def wrapf(err: BaseException | None, fmt: str, *args: Any) -> BaseError:
    """Same as wrap, with %-style formatting."""
    stack, context = stack_trace()
    return BaseError(_format(fmt, args), stack, context, err)

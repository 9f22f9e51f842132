"""Error capability abstraction and report models.

AnnotatedError is the contract every chain node satisfies. Anything in a chain
that is not an AnnotatedError is a foreign error: walkers render it with str()
and stop there.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any, Self

from pydantic import BaseModel, ConfigDict, Field, computed_field

# ═══════════════════════════════════════════════════════════════════════════════
# Type Aliases
# ═══════════════════════════════════════════════════════════════════════════════

State = dict[str, Any]

ERROR_HEADER = "ERROR:"
STACK_HEADER = "ORIGINAL STACK TRACE:"

# ═══════════════════════════════════════════════════════════════════════════════
# Capability
# ═══════════════════════════════════════════════════════════════════════════════


class AnnotatedError(Exception, ABC):
    """An error carrying a captured stack, free-form state and an optional inner cause."""

    @abstractmethod
    def get_message(self) -> str:
        """The error message without stack trace or inner errors."""

    @abstractmethod
    def get_stack(self) -> str:
        """The captured stack trace without the message."""

    @abstractmethod
    def get_context(self) -> str:
        """Stack text trailing the captured frames."""

    @abstractmethod
    def get_inner(self) -> BaseException | None:
        """The wrapped error, None if this error wraps nothing."""

    @abstractmethod
    def has_inner(self, target: BaseException) -> bool:
        """Whether target is this error or any transitive inner error (by identity)."""

    @abstractmethod
    def set_state(self, state: State | None) -> Self:
        """Replace the state, as decided by the creator."""

    @abstractmethod
    def get_state(self) -> State | None: ...

    @abstractmethod
    def get_annotated_states(self) -> list[State]:
        """State of this error and of every inner error, outermost first."""

    @abstractmethod
    def error(self) -> str:
        """Full diagnostic report for the chain."""


# ═══════════════════════════════════════════════════════════════════════════════
# Report
# ═══════════════════════════════════════════════════════════════════════════════


class ReportEntry(BaseModel):
    """One chain node in a report. Foreign errors carry no state line."""

    model_config = ConfigDict(frozen=True, revalidate_instances="never")

    message: str
    state: str | None = Field(default=None, description="State encoded as compact JSON")

    @computed_field
    @property
    def foreign(self) -> bool:
        return self.state is None


_EMPTY_ENTRIES: tuple[ReportEntry, ...] = ()


class ErrorReport(BaseModel):
    """Structured form of the diagnostic rendering."""

    model_config = ConfigDict(frozen=True, revalidate_instances="never")

    entries: tuple[ReportEntry, ...] = _EMPTY_ENTRIES
    original_stack: str = Field(default="", description="Stack of the innermost annotated error")

    @computed_field
    @property
    def depth(self) -> int:
        """Number of chain nodes in the report."""
        return len(self.entries)

    def render(self) -> str:
        lines = [ERROR_HEADER]
        for entry in self.entries:
            lines.append(entry.message)
            if entry.state is not None:
                lines.append(entry.state)
        lines += ["", STACK_HEADER, self.original_stack]
        return "\n".join(lines)

    __str__ = render

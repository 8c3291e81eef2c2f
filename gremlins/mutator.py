"""Mutant statuses, mutation types, source positions and the mutator protocol."""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum
from typing import Protocol, runtime_checkable


class Status(IntEnum):
    """The outcome of a mutant.

    NOT_COVERED: found but not covered by tests.
    RUNNABLE: covered by tests, so it can be executed.
    LIVED: tested, and the tests still passed.
    KILLED: tested, and the tests failed.
    """

    NOT_COVERED = 0
    RUNNABLE = 1
    SKIPPED = 2
    LIVED = 3
    KILLED = 4
    NOT_VIABLE = 5
    TIMED_OUT = 6

    def __str__(self) -> str:
        return _STATUS_LABELS[self]


_STATUS_LABELS = {
    Status.NOT_COVERED: "NOT COVERED",
    Status.RUNNABLE: "RUNNABLE",
    Status.SKIPPED: "SKIPPED",
    Status.LIVED: "LIVED",
    Status.KILLED: "KILLED",
    Status.NOT_VIABLE: "NOT VIABLE",
    Status.TIMED_OUT: "TIMED OUT",
}


class MutatorType(IntEnum):
    """The kind of mutation applied to a token."""

    ARITHMETIC_BASE = 0
    CONDITIONALS_BOUNDARY = 1
    CONDITIONALS_NEGATION = 2
    INCREMENT_DECREMENT = 3
    INVERT_ASSIGNMENTS = 4
    INVERT_BITWISE = 5
    INVERT_BITWISE_ASSIGNMENTS = 6
    INVERT_LOGICAL = 7
    INVERT_LOOP_CTRL = 8
    INVERT_NEGATIVES = 9
    REMOVE_SELF_ASSIGNMENTS = 10

    def __str__(self) -> str:
        return _TYPE_LABELS[self]


_TYPE_LABELS = {
    MutatorType.ARITHMETIC_BASE: "ARITHMETIC_BASE",
    MutatorType.CONDITIONALS_BOUNDARY: "CONDITIONALS_BOUNDARY",
    MutatorType.CONDITIONALS_NEGATION: "CONDITIONALS_NEGATION",
    MutatorType.INCREMENT_DECREMENT: "INCREMENT_DECREMENT",
    MutatorType.INVERT_ASSIGNMENTS: "INVERT_ASSIGNMENTS",
    MutatorType.INVERT_BITWISE: "INVERT_BITWISE",
    MutatorType.INVERT_BITWISE_ASSIGNMENTS: "INVERT_BWASSIGN",
    MutatorType.INVERT_LOGICAL: "INVERT_LOGICAL",
    MutatorType.INVERT_LOOP_CTRL: "INVERT_LOOPCTRL",
    MutatorType.INVERT_NEGATIVES: "INVERT_NEGATIVES",
    MutatorType.REMOVE_SELF_ASSIGNMENTS: "REMOVE_SELF_ASSIGNMENTS",
}

# The order in which mutation types are iterated.
TYPES: tuple[MutatorType, ...] = (
    MutatorType.ARITHMETIC_BASE,
    MutatorType.CONDITIONALS_BOUNDARY,
    MutatorType.CONDITIONALS_NEGATION,
    MutatorType.INVERT_ASSIGNMENTS,
    MutatorType.INVERT_BITWISE,
    MutatorType.INVERT_BITWISE_ASSIGNMENTS,
    MutatorType.INCREMENT_DECREMENT,
    MutatorType.INVERT_LOGICAL,
    MutatorType.INVERT_LOOP_CTRL,
    MutatorType.INVERT_NEGATIVES,
    MutatorType.REMOVE_SELF_ASSIGNMENTS,
)


@dataclass(frozen=True)
class Position:
    """A location in a source file; lines and columns start at 1."""

    filename: str = ""
    line: int = 0
    column: int = 0
    offset: int = 0

    @property
    def is_valid(self) -> bool:
        return self.line > 0

    def __str__(self) -> str:
        text = self.filename
        if self.is_valid:
            if text:
                text += ":"
            text += str(self.line)
            if self.column:
                text += f":{self.column}"
        return text or "-"


@runtime_checkable
class Mutator(Protocol):
    """A possible mutation of the source code."""

    type: MutatorType
    status: Status
    position: Position
    pos: int
    pkg: str
    workdir: str

    def apply(self) -> None:
        """Apply the mutation to the source code."""
        ...

    def rollback(self) -> None:
        """Restore the source code to its original state."""
        ...
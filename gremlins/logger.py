"""Printing of mutants filtered by their status."""

from __future__ import annotations

from dataclasses import dataclass
from typing import AbstractSet

from gremlins import log, report
from gremlins.mutator import Mutator, Status

_FILTER_LETTERS = {
    "l": Status.LIVED,
    "c": Status.NOT_COVERED,
    "t": Status.TIMED_OUT,
    "k": Status.KILLED,
    "v": Status.NOT_VIABLE,
    "s": Status.SKIPPED,
    "r": Status.RUNNABLE,
}


class InvalidFilterError(ValueError):
    """Raised when a status filter holds an unknown letter."""

    def __init__(self, message: str = "invalid statuses filter, only 'lctkvsr' letters allowed") -> None:
        super().__init__(message)


def parse_filter(s: str) -> set[Status] | None:
    """Turn a string of status letters into a set of statuses.

    An empty string means no filter and gives None.
    """
    if not s:
        return None
    try:
        return {_FILTER_LETTERS[letter] for letter in s}
    except KeyError:
        raise InvalidFilterError() from None


@dataclass
class MutantLogger:
    """Prints mutants whose status is in the filter, or all when there is none."""

    filter: AbstractSet[Status] | None = None

    def mutant(self, m: Mutator) -> None:
        if self.filter is None or Status(m.status) in self.filter:
            report.mutant(m)


def new_logger(output_statuses: str = "") -> MutantLogger:
    """Build a logger from a status filter; an invalid filter is reported and ignored."""
    try:
        statuses = parse_filter(output_statuses)
    except InvalidFilterError as err:
        log.infof("output-statuses filter not applied: %s\n", err)
        statuses = None
    return MutantLogger(filter=statuses)
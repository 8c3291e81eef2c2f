"""Summary report of a mutation testing run, printed and optionally saved as JSON."""

from __future__ import annotations

import os
import sys
from collections import Counter
from dataclasses import dataclass, field
from datetime import timedelta
from typing import Any, Sequence

from gremlins import log
from gremlins.mutator import Mutator, MutatorType, Status
from gremlins.structure import Mutation, MutatorStatistics, OutputFile, OutputResult

EFFICACY_THRESHOLD_EXIT_CODE = 10
MUTANT_COVERAGE_THRESHOLD_EXIT_CODE = 11

_RED = "31"
_GREEN = "32"
_YELLOW = "33"
_HI_BLACK = "90"
_HI_GREEN = "92"

_MICROSECOND = 1
_MILLISECOND = 1000 * _MICROSECOND
_SECOND = 1000 * _MILLISECOND
_MINUTE = 60 * _SECOND
_HOUR = 60 * _MINUTE
_DAY = 24 * _HOUR
_WEEK = 7 * _DAY
_YEAR = 365 * _DAY

_UNITS = (
    ("year", "years", _YEAR),
    ("week", "weeks", _WEEK),
    ("day", "days", _DAY),
    ("hour", "hours", _HOUR),
    ("minute", "minutes", _MINUTE),
    ("second", "seconds", _SECOND),
    ("millisecond", "milliseconds", _MILLISECOND),
    ("microsecond", "microseconds", _MICROSECOND),
)

_ELAPSED_UNITS_SHOWN = 2


def _paint(value: Any, code: str) -> str:
    """Colour a value with ANSI codes when standard output is a terminal."""
    text = str(value)
    if os.environ.get("NO_COLOR"):
        return text
    isatty = getattr(sys.stdout, "isatty", None)
    if isatty is None or not isatty():
        return text
    return f"\x1b[{code}m{text}\x1b[0m"


class ExitError(Exception):
    """Raised when the run does not meet a configured threshold."""

    def __init__(self, code: int, message: str) -> None:
        super().__init__(message)
        self._code = code

    def exit_code(self) -> int:
        return self._code


@dataclass
class Results:
    """The mutants to report and the time it took to find and test them."""

    mutants: Sequence[Mutator] = field(default_factory=list)
    elapsed: timedelta = field(default_factory=timedelta)
    module: str = ""


@dataclass
class ReportOptions:
    """Settings that shape the report.

    A threshold of zero disables the corresponding check.
    """

    dry_run: bool = False
    output: str = ""
    threshold_efficacy: float = 0.0
    threshold_mcoverage: float = 0.0


def format_elapsed(elapsed: timedelta) -> str:
    """Render a duration in words, keeping only the first two non-zero units."""
    remaining = elapsed // timedelta(microseconds=1)
    sign = ""
    if remaining < 0:
        sign = "-"
        remaining = -remaining
    parts = []
    for singular, plural, size in _UNITS:
        amount, remaining = divmod(remaining, size)
        if amount:
            parts.append(f"{amount} {singular if amount == 1 else plural}")
    if not parts:
        return "0 seconds"
    return sign + " ".join(parts[:_ELAPSED_UNITS_SHOWN])


@dataclass
class _Report:
    module: str
    elapsed: timedelta
    dry_run: bool
    files: dict[str, list[Mutation]] = field(default_factory=dict)
    counts: Counter = field(default_factory=Counter)
    statistics: MutatorStatistics = field(default_factory=MutatorStatistics)
    efficacy: float = 0.0
    coverage: float = 0.0

    @classmethod
    def build(cls, results: Results, dry_run: bool) -> _Report | None:
        if not results.mutants:
            return None
        rep = cls(module=results.module, elapsed=results.elapsed, dry_run=dry_run)
        for m in results.mutants:
            status = Status(m.status)
            mutator_type = MutatorType(m.type)
            pos = m.position
            rep.files.setdefault(pos.filename, []).append(
                Mutation(
                    type=str(mutator_type),
                    status=str(status),
                    line=pos.line,
                    column=pos.column,
                )
            )
            rep.counts[status] += 1
            rep.statistics.increment(mutator_type)
        rep._compute_rates()
        return rep

    def _compute_rates(self) -> None:
        killed = self.counts[Status.KILLED]
        lived = self.counts[Status.LIVED]
        not_covered = self.counts[Status.NOT_COVERED]
        runnable = self.counts[Status.RUNNABLE]
        if not self.dry_run:
            if killed > 0:
                self.efficacy = killed / (killed + lived) * 100
            if killed + lived > 0:
                self.coverage = (killed + lived) / (killed + lived + not_covered) * 100
        elif runnable > 0:
            self.coverage = runnable / (runnable + not_covered) * 100

    def print_findings(self) -> None:
        if self.dry_run:
            self._print_dry_run()
        else:
            self._print_full_run()

    def _print_dry_run(self) -> None:
        not_covered = _paint(self.counts[Status.NOT_COVERED], _YELLOW)
        runnable = _paint(self.counts[Status.RUNNABLE], _GREEN)
        log.infoln("")
        log.infof("Dry run completed in %s\n", format_elapsed(self.elapsed))
        log.infof("Runnable: %s, Not covered: %s\n", runnable, not_covered)
        log.infof("Mutator coverage: %.2f%%\n", self.coverage)

    def _print_full_run(self) -> None:
        killed = _paint(self.counts[Status.KILLED], _HI_GREEN)
        lived = _paint(self.counts[Status.LIVED], _RED)
        timed_out = _paint(self.counts[Status.TIMED_OUT], _GREEN)
        not_viable = _paint(self.counts[Status.NOT_VIABLE], _HI_BLACK)
        skipped = _paint(self.counts[Status.SKIPPED], _HI_BLACK)
        not_covered = _paint(self.counts[Status.NOT_COVERED], _YELLOW)
        log.infoln("")
        log.infof("Mutation testing completed in %s\n", format_elapsed(self.elapsed))
        log.infof("Killed: %s, Lived: %s, Not covered: %s\n", killed, lived, not_covered)
        log.infof("Timed out: %s, Not viable: %s, Skipped: %s\n", timed_out, not_viable, skipped)
        log.infof("Test efficacy: %.2f%%\n", self.efficacy)
        log.infof("Mutator coverage: %.2f%%\n", self.coverage)

    def to_output(self) -> OutputResult:
        killed = self.counts[Status.KILLED]
        lived = self.counts[Status.LIVED]
        not_viable = self.counts[Status.NOT_VIABLE]
        return OutputResult(
            go_module=self.module,
            files=[OutputFile(filename=name, mutations=list(muts)) for name, muts in self.files.items()],
            test_efficacy=self.efficacy,
            mutations_coverage=self.coverage,
            mutants_total=lived + killed + not_viable,
            mutants_killed=killed,
            mutants_lived=lived,
            mutants_not_viable=not_viable,
            mutants_not_covered=self.counts[Status.NOT_COVERED],
            elapsed_time=self.elapsed.total_seconds(),
            mutator_statistics=self.statistics,
        )

    def write_file(self, output: str) -> None:
        if not output:
            return
        try:
            with open(output, "w", encoding="utf-8") as f:
                f.write(self.to_output().to_json())
        except OSError as err:
            log.errorf("impossible to write file: %s\n", err)

    def assess(self, threshold_efficacy: float, threshold_mcoverage: float) -> None:
        if self.dry_run:
            return
        if threshold_efficacy > 0 and self.efficacy <= threshold_efficacy:
            raise ExitError(
                EFFICACY_THRESHOLD_EXIT_CODE,
                f"efficacy {self.efficacy:.2f}% is not above the threshold {threshold_efficacy}%",
            )
        if threshold_mcoverage > 0 and self.coverage <= threshold_mcoverage:
            raise ExitError(
                MUTANT_COVERAGE_THRESHOLD_EXIT_CODE,
                f"mutator coverage {self.coverage:.2f}% is not above the threshold {threshold_mcoverage}%",
            )


def do(results: Results, options: ReportOptions | None = None) -> None:
    """Report the results through the logger and, if asked, to a JSON file.

    Raises ExitError when efficacy or coverage is not above its threshold.
    The logger must be initialised for anything to be printed.
    """
    opts = options or ReportOptions()
    rep = _Report.build(results, opts.dry_run)
    if rep is None:
        log.infoln("\nNo results to report.")
        return
    rep.print_findings()
    rep.write_file(opts.output)
    rep.assess(float(opts.threshold_efficacy), float(opts.threshold_mcoverage))


_STATUS_COLOURS = {
    Status.KILLED: _HI_GREEN,
    Status.RUNNABLE: _HI_GREEN,
    Status.LIVED: _RED,
    Status.NOT_COVERED: _YELLOW,
    Status.TIMED_OUT: _GREEN,
    Status.NOT_VIABLE: _HI_BLACK,
    Status.SKIPPED: _HI_BLACK,
}


def mutant(m: Mutator) -> None:
    """Log one mutant with its status, type and position."""
    status = Status(m.status)
    label = str(status)
    padding = " " * max(0, 12 - len(label))
    painted = _paint(label, _STATUS_COLOURS[status])
    log.infof("%s%s %s at %s\n", padding, painted, MutatorType(m.type), m.position)
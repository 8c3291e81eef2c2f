# gremlins

Reporting tools for mutation testing. You describe the mutants that a run
produced. The package prints one line per mutant and a summary of how
effective the test suite was, and it checks the result against efficacy
and coverage thresholds. It can also write the findings to a JSON file.

## Installation

```
pip install .
```

To run the test suite:

```
pip install ".[test]"
pytest
```

## Concepts

The `gremlins.mutator` module holds the basic types:

- `Status` gives the state of a mutant. Its text forms are `NOT COVERED`,
  `RUNNABLE`, `SKIPPED`, `LIVED`, `KILLED`, `NOT VIABLE` and `TIMED OUT`.
- `MutatorType` gives the kind of mutation. Examples are
  `CONDITIONALS_BOUNDARY`, `ARITHMETIC_BASE` and `INVERT_BWASSIGN`.
- `Position` gives the file, line and column of a mutant. It prints as
  `file:line:column`, or as `-` when it is empty.
- `Mutator` is a protocol. It lists the attributes that a mutant object
  must provide to the reporting code (`type`, `status`, `position` and
  others) and the methods `apply` and `rollback`.

## Logging

All output goes through `gremlins.log`. The logger is process-wide, and
nothing is written until `init` has been called:

```python
import sys
from gremlins import log

log.init(sys.stdout, sys.stderr, silent=False)
log.infof("found %d mutants\n", 3)
log.errorln("something went wrong")   # "ERROR: something went wrong"
```

A second call to `init` has no effect until `log.reset()` removes the
logger. In silent mode the informational output is dropped, but errors are
still written. Use `log.set_silent` to turn silent mode on or off.
The `ERROR` label is coloured red only when the error stream is a
terminal and `NO_COLOR` is not set.

## Reporting a run

```python
from datetime import timedelta
from gremlins import log, report

log.init(sys.stdout, sys.stderr)
results = report.Results(module="example.com/go/module", mutants=mutants,
                         elapsed=timedelta(minutes=2, seconds=22))
options = report.ReportOptions(output="findings.json",
                               threshold_efficacy=60,
                               threshold_mcoverage=80)
try:
    report.do(results, options)
except report.ExitError as exc:
    raise SystemExit(exc.exit_code())
```

`report.do` prints a blank line followed by a summary such as:

```
Mutation testing completed in 2 minutes 22 seconds
Killed: 1, Lived: 1, Not covered: 1
Timed out: 1, Not viable: 1, Skipped: 1
Test efficacy: 50.00%
Mutator coverage: 66.67%
```

- Test efficacy is killed / (killed + lived).
- Mutator coverage is (killed + lived) / (killed + lived + not covered).
- `report.format_elapsed` writes durations using only the first two
  non-zero units.
- When there are no mutants, `do` prints `No results to report.` and does
  nothing else.

A threshold of zero is not checked. When a threshold is set and the value
is at or below it, `do` raises `ExitError`. The exit code is 10 for
efficacy (`EFFICACY_THRESHOLD_EXIT_CODE`) and 11 for coverage
(`MUTANT_COVERAGE_THRESHOLD_EXIT_CODE`).

Setting `ReportOptions(dry_run=True)` changes the summary: it lists only
runnable and uncovered mutants, and coverage is runnable / (runnable + not
covered). No thresholds are checked in a dry run.

When `output` is set, the findings are written to that path as compact
JSON. If the file cannot be written, an error is logged and no exception
is raised. The classes in `gremlins.structure` describe the layout of the
file:

- `OutputResult` holds `go_module`, `files`, `test_efficacy`,
  `mutations_coverage`, the mutant counts, `elapsed_time` in seconds and
  `mutator_statistics`.
- `OutputFile` holds a file name and its mutations.
- `Mutation` holds a type, a status, a line and a column.
- `MutatorStatistics` holds the count for each mutation type. Counters
  that are zero are left out of the JSON.

Each of these classes has `to_dict` and `from_dict`, and `OutputResult`
also has `to_json`.

Counts in the summary, and statuses in per-mutant lines, are coloured only
when standard output is a terminal and `NO_COLOR` is not set.

## Per-mutant lines

`report.mutant(m)` prints one line for a mutant. The status is
right-aligned:

```
       LIVED CONDITIONALS_BOUNDARY at aFolder/aFile.go:12:3
```

`gremlins.logger.new_logger("lc")` builds a `MutantLogger` that prints only
the statuses you choose. Each letter stands for one status:

- `l`: lived
- `c`: not covered
- `t`: timed out
- `k`: killed
- `v`: not viable
- `s`: skipped
- `r`: runnable

For an empty string, `parse_filter` returns `None`, which means every
status is printed. For any other letter it raises `InvalidFilterError`.
When `new_logger` gets an invalid filter, it logs
`output-statuses filter not applied: ...` and prints every status.

## What this package does not do

This package only reports on mutants that you give it. It has no command
line, and it reads no configuration files. It does not find mutation
points in source code, apply mutations, or run any test suite. All
settings are passed in code through `ReportOptions`, `new_logger` and
`log.init`.
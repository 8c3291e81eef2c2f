"""Data structures of the JSON results file."""

from __future__ import annotations

import json
from dataclasses import dataclass, field, fields
from typing import Any

from gremlins.mutator import MutatorType


@dataclass
class Mutation:
    """A single mutation found in a file."""

    type: str
    status: str
    line: int
    column: int

    def to_dict(self) -> dict[str, Any]:
        return {
            "type": self.type,
            "status": self.status,
            "line": self.line,
            "column": self.column,
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> Mutation:
        return cls(
            type=data.get("type", ""),
            status=data.get("status", ""),
            line=data.get("line", 0),
            column=data.get("column", 0),
        )


@dataclass
class OutputFile:
    """A source file and the mutations found in it."""

    filename: str
    mutations: list[Mutation] = field(default_factory=list)

    def to_dict(self) -> dict[str, Any]:
        return {
            "file_name": self.filename,
            "mutations": [m.to_dict() for m in self.mutations],
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> OutputFile:
        return cls(
            filename=data.get("file_name", ""),
            mutations=[Mutation.from_dict(m) for m in data.get("mutations") or []],
        )


@dataclass
class MutatorStatistics:
    """Number of mutants found for each mutation type."""

    arithmetic_base: int = 0
    conditionals_negation: int = 0
    conditionals_boundary: int = 0
    increment_decrement: int = 0
    invert_assignments: int = 0
    invert_bitwise: int = 0
    invert_bitwise_assignments: int = 0
    invert_logical: int = 0
    invert_loop_ctrl: int = 0
    invert_negatives: int = 0
    remove_self_assignments: int = 0

    def increment(self, mutator_type: MutatorType) -> None:
        """Count one more mutant of the given type."""
        name = MutatorType(mutator_type).name.lower()
        setattr(self, name, getattr(self, name) + 1)

    def to_dict(self) -> dict[str, int]:
        """Return the non-zero counters keyed by their JSON names."""
        return {f.name: getattr(self, f.name) for f in fields(self) if getattr(self, f.name)}

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> MutatorStatistics:
        return cls(**{f.name: data.get(f.name, 0) for f in fields(cls)})


@dataclass
class OutputResult:
    """The whole content of the results file."""

    go_module: str = ""
    files: list[OutputFile] = field(default_factory=list)
    test_efficacy: float = 0.0
    mutations_coverage: float = 0.0
    mutants_total: int = 0
    mutants_killed: int = 0
    mutants_lived: int = 0
    mutants_not_viable: int = 0
    mutants_not_covered: int = 0
    elapsed_time: float = 0.0
    mutator_statistics: MutatorStatistics = field(default_factory=MutatorStatistics)

    def to_dict(self) -> dict[str, Any]:
        return {
            "go_module": self.go_module,
            "files": [f.to_dict() for f in self.files],
            "test_efficacy": self.test_efficacy,
            "mutations_coverage": self.mutations_coverage,
            "mutants_total": self.mutants_total,
            "mutants_killed": self.mutants_killed,
            "mutants_lived": self.mutants_lived,
            "mutants_not_viable": self.mutants_not_viable,
            "mutants_not_covered": self.mutants_not_covered,
            "elapsed_time": self.elapsed_time,
            "mutator_statistics": self.mutator_statistics.to_dict(),
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> OutputResult:
        return cls(
            go_module=data.get("go_module", ""),
            files=[OutputFile.from_dict(f) for f in data.get("files") or []],
            test_efficacy=float(data.get("test_efficacy", 0.0)),
            mutations_coverage=float(data.get("mutations_coverage", 0.0)),
            mutants_total=data.get("mutants_total", 0),
            mutants_killed=data.get("mutants_killed", 0),
            mutants_lived=data.get("mutants_lived", 0),
            mutants_not_viable=data.get("mutants_not_viable", 0),
            mutants_not_covered=data.get("mutants_not_covered", 0),
            elapsed_time=float(data.get("elapsed_time", 0.0)),
            mutator_statistics=MutatorStatistics.from_dict(data.get("mutator_statistics") or {}),
        )

    def to_json(self) -> str:
        """Serialise to compact JSON."""
        return json.dumps(self.to_dict(), separators=(",", ":"))
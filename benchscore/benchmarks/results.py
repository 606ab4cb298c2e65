"""Run results collection and emission.

RunResults is a hooks implementation: pass ``results.hooks()`` to the
runner and it records every notification of the run.

Supports multiple output formats: JSON, YAML, and text.

Usage:
    from benchscore.benchmarks.results import RunResults, OutputFormat

    results = RunResults()
    run_all(suites, results.hooks())

    results.emit("results.json", OutputFormat.JSON)
    results.emit(sys.stdout, OutputFormat.TEXT)
"""

import json
import platform
import sys
from datetime import UTC, datetime
from enum import Enum
from io import StringIO
from pathlib import Path
from typing import Any, TextIO

import psutil
import yaml  # type: ignore[import-untyped, unused-ignore]

from benchscore.benchmarks.errors import BenchmarkError
from benchscore.benchmarks.hooks import RunHooks
from benchscore.benchmarks.scoring import format_score


class OutputFormat(Enum):
    """Supported output formats for run results."""

    JSON = "json"
    YAML = "yaml"
    TEXT = "text"


class RunResults:
    """Collects the notifications of one run and emits them as a report.

    Every step opens an entry and the following result or error closes
    it, so benchmarks that share a name in different suites are kept
    apart and reported in run order.

    Example:
        >>> results = RunResults()
        >>> hooks = results.hooks()
        >>> hooks.on_step("Regex", 50.0)
        >>> hooks.on_result("Regex", 1840.2)
        >>> results.emit(sys.stdout, OutputFormat.TEXT)
    """

    def __init__(self) -> None:
        """Initialize an empty results collection."""
        self._entries: list[dict[str, Any]] = []
        self._score: float | None = None
        self._metadata: dict[str, Any] = {
            "timestamp_start": datetime.now(UTC).isoformat(),
            "timestamp_end": None,
            "benchscore_version": self._get_version(),
            "host": self._host_info(),
        }

    def _get_version(self) -> str:
        from benchscore import __version__

        return str(__version__)

    def _host_info(self) -> dict[str, Any]:
        return {
            "platform": platform.platform(),
            "python": platform.python_version(),
            "cpu_physical_cores": psutil.cpu_count(logical=False),
            "cpu_logical_cores": psutil.cpu_count(logical=True),
            "memory_total_gb": round(psutil.virtual_memory().total / 1024**3, 2),
        }

    # -------------------------------------------------------------------------
    # Hooks
    # -------------------------------------------------------------------------

    def hooks(self) -> RunHooks:
        """Return RunHooks that record into this collection."""
        return RunHooks(
            on_step=self.add_step,
            on_error=self.add_error,
            on_result=self.add_result,
            on_score=self.set_score,
        )

    def add_step(self, name: str, percentage: float) -> None:
        """Record that a benchmark is starting."""
        self._entries.append(
            {"name": name, "percentage": percentage, "score": None, "error": None}
        )

    def add_result(self, name: str, score: float) -> None:
        """Record a benchmark score."""
        self._open_entry(name)["score"] = score

    def add_error(self, name: str, error: BenchmarkError | str) -> None:
        """Record a benchmark failure."""
        self._open_entry(name)["error"] = str(error)

    def _open_entry(self, name: str) -> dict[str, Any]:
        # Outcomes follow their step; one without a step gets its own entry
        if self._entries:
            last = self._entries[-1]
            if last["name"] == name and last["score"] is None and last["error"] is None:
                return last
        entry = {"name": name, "percentage": None, "score": None, "error": None}
        self._entries.append(entry)
        return entry

    def set_score(self, score: float) -> None:
        """Record the overall score."""
        self._score = score

    def finalize(self) -> None:
        """Mark results as complete, setting end timestamp."""
        self._metadata["timestamp_end"] = datetime.now(UTC).isoformat()

    # -------------------------------------------------------------------------
    # Accessors
    # -------------------------------------------------------------------------

    @property
    def results(self) -> list[tuple[str, float]]:
        """(name, score) of successful benchmarks, in run order."""
        return [(e["name"], e["score"]) for e in self._entries if e["score"] is not None]

    @property
    def errors(self) -> list[tuple[str, str]]:
        """(name, message) of failed benchmarks, in run order."""
        return [(e["name"], e["error"]) for e in self._entries if e["error"] is not None]

    @property
    def steps(self) -> list[tuple[str, float]]:
        """(name, percentage) for every step notification, in order."""
        return [
            (e["name"], e["percentage"])
            for e in self._entries
            if e["percentage"] is not None
        ]

    @property
    def score(self) -> float | None:
        """Overall score, or None if the run was not clean."""
        return self._score

    @property
    def success(self) -> bool:
        """True if no benchmark failed."""
        return not self.errors

    def to_dict(self) -> dict[str, Any]:
        """Convert results to a dictionary for serialization."""
        errors = [{"name": name, "error": error} for name, error in self.errors]
        return {
            "metadata": self._metadata,
            "results": [{"name": name, "score": score} for name, score in self.results],
            "errors": errors if errors else None,
            "score": self._score,
            "summary": self._generate_summary(),
        }

    def _generate_summary(self) -> dict[str, Any]:
        passed = len(self.results)
        failed = len(self.errors)
        total = passed + failed

        return {
            "total_benchmarks": total,
            "passed": passed,
            "failed": failed,
            "success_rate": passed / total if total > 0 else 0.0,
        }

    # -------------------------------------------------------------------------
    # Emission Methods
    # -------------------------------------------------------------------------

    def emit(
        self,
        output: str | Path | TextIO,
        format: OutputFormat = OutputFormat.JSON,
        indent: int = 2,
    ) -> None:
        """Emit results to a file or stream.

        Args:
            output: File path or file-like object (e.g., sys.stdout).
            format: Output format (JSON, YAML, TEXT).
            indent: Indentation level for JSON/YAML.
        """
        self.finalize()

        if format == OutputFormat.JSON:
            content = json.dumps(self.to_dict(), indent=indent, default=str)
        elif format == OutputFormat.YAML:
            content = yaml.safe_dump(
                self.to_dict(), indent=indent, default_flow_style=False, sort_keys=False
            )
        elif format == OutputFormat.TEXT:
            content = self._to_text()
        else:
            raise ValueError(f"Unknown format: {format}")

        self._write_output(output, content)

    def _to_text(self) -> str:
        output = StringIO()
        data = self.to_dict()

        output.write("\n" + "=" * 60 + "\n")
        output.write("  BENCHSCORE RESULTS\n")
        output.write("=" * 60 + "\n\n")

        meta = data["metadata"]
        output.write(f"Started:  {meta['timestamp_start']}\n")
        output.write(f"Finished: {meta['timestamp_end']}\n")
        output.write(f"Version:  {meta['benchscore_version']}\n\n")

        summary = data["summary"]
        output.write("-" * 40 + "\n")
        output.write(f"Benchmarks:   {summary['total_benchmarks']}\n")
        output.write(f"Passed:       {summary['passed']}\n")
        output.write(f"Failed:       {summary['failed']}\n")
        output.write(f"Success Rate: {summary['success_rate']:.1%}\n")
        output.write("-" * 40 + "\n\n")

        for entry in self._entries:
            shown = "*error*" if entry["score"] is None else format_score(entry["score"])
            output.write(f"  {entry['name']:<24} {shown:>10}\n")

        if data["errors"]:
            output.write("\nERRORS\n")
            output.write("-" * 40 + "\n")
            for item in data["errors"]:
                output.write(f"  {item['name']}: {item['error']}\n")

        output.write("\n")
        if self._score is not None:
            output.write(f"Score: {format_score(self._score)}\n")
        else:
            output.write("Score: n/a (run had errors)\n")
        output.write("=" * 60 + "\n")
        return output.getvalue()

    def _write_output(self, output: str | Path | TextIO, content: str) -> None:
        if isinstance(output, str | Path):
            Path(output).write_text(content)
        else:
            output.write(content)
            if output is not sys.stdout and output is not sys.stderr:
                output.flush()

    # -------------------------------------------------------------------------
    # Convenience Methods
    # -------------------------------------------------------------------------

    def emit_json(self, path: str | Path) -> None:
        """Emit results to a JSON file."""
        self.emit(path, OutputFormat.JSON)

    def emit_yaml(self, path: str | Path) -> None:
        """Emit results to a YAML file."""
        self.emit(path, OutputFormat.YAML)

    def emit_stdout(self) -> None:
        """Emit human-readable results to stdout."""
        self.emit(sys.stdout, OutputFormat.TEXT)

    def __len__(self) -> int:
        """Return number of successful results."""
        return len(self.results)

    def __contains__(self, name: str) -> bool:
        """Check if a benchmark has a score."""
        return any(scored == name for scored, _ in self.results)

"""Text suite: regular expressions, JSON and string building."""

import json
import random
import re
import string

from benchscore.benchmarks.base import Benchmark
from benchscore.benchmarks.suite import Suite

SUITE_NAME = "Text"

_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR")
_LOG_PATTERN = re.compile(
    r"^(?P<ts>\d{2}:\d{2}:\d{2}) (?P<level>ERROR|WARNING) \[(?P<mod>[a-z.]+)\] (?P<msg>.*)$",
    re.MULTILINE,
)


def _word(min_len: int = 3, max_len: int = 9) -> str:
    return "".join(
        random.choices(string.ascii_lowercase, k=random.randint(min_len, max_len))
    )


class RegexWorkload:
    """Extract warnings and errors from a synthetic log."""

    def __init__(self, lines: int = 2000) -> None:
        self.lines = lines
        self._text: str | None = None
        self._expected = 0

    def setup(self) -> None:
        rows = []
        for i in range(self.lines):
            ts = f"{i // 3600 % 24:02d}:{i // 60 % 60:02d}:{i % 60:02d}"
            level = random.choice(_LEVELS)
            module = f"{_word()}.{_word()}"
            message = " ".join(_word() for _ in range(random.randint(3, 10)))
            rows.append(f"{ts} {level} [{module}] {message}")
        self._text = "\n".join(rows)
        self._expected = sum(
            1 for row in rows if row.split(" ", 2)[1] in ("ERROR", "WARNING")
        )

    def run(self) -> None:
        if self._text is None:
            raise RuntimeError("Log text not initialized. Did setup() run?")
        found = sum(1 for _ in _LOG_PATTERN.finditer(self._text))
        if found != self._expected:
            raise RuntimeError(f"Expected {self._expected} matches, found {found}")

    def teardown(self) -> None:
        self._text = None


class JsonWorkload:
    """Serialize and parse a nested document."""

    def __init__(self, records: int = 300) -> None:
        self.records = records
        self._document: dict | None = None

    def setup(self) -> None:
        self._document = {
            "version": 1,
            "records": [
                {
                    "id": i,
                    "name": _word(),
                    "score": random.random() * 1000,
                    "tags": [_word() for _ in range(random.randint(0, 5))],
                    "active": random.random() < 0.5,
                    "parent": None if i == 0 else random.randrange(i),
                }
                for i in range(self.records)
            ],
        }

    def run(self) -> None:
        if self._document is None:
            raise RuntimeError("Document not initialized. Did setup() run?")
        if json.loads(json.dumps(self._document)) != self._document:
            raise RuntimeError("JSON round trip changed the document")

    def teardown(self) -> None:
        self._document = None


def build_strings(count: int = 5000) -> str:
    """Format and join ``count`` small records."""
    parts = [
        f"{i:05d}:{i * 7 % 13:x}:{'even' if i % 2 == 0 else 'odd'}"
        for i in range(count)
    ]
    return ";".join(parts).upper()


def build_suite() -> Suite:
    """Build the Text suite."""
    regex = RegexWorkload()
    doc = JsonWorkload()
    return Suite(
        SUITE_NAME,
        [
            Benchmark(
                "Regex",
                reference=1.2,
                run=regex.run,
                setup=regex.setup,
                teardown=regex.teardown,
            ),
            Benchmark(
                "JSON",
                reference=2.5,
                run=doc.run,
                setup=doc.setup,
                teardown=doc.teardown,
            ),
            Benchmark("StringBuild", reference=1.5, run=build_strings),
        ],
    )

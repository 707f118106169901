"""
Line-oriented life-data record parsing.

Each non-blank line is ``time,code[,...]`` where ``code`` is F (failure)
or S (suspension), case-insensitive. Extra fields are ignored. A line is
dropped when it has fewer than two fields, a time that does not parse as
a finite non-negative number, or an unknown code. Dropped lines never
raise; they are reported by 1-based line number.
"""

from __future__ import annotations

import math
from dataclasses import dataclass

from pyweibull.weibull.design import WeibullDesign

FAILURE_CODE = "F"
SUSPENSION_CODE = "S"


@dataclass(frozen=True)
class ParsedRecords:
    """Parsed life data plus diagnostics about skipped input."""

    design: WeibullDesign
    n_lines: int                      # non-blank lines seen
    dropped_lines: tuple[int, ...]    # 1-based line numbers

    @property
    def n_dropped(self) -> int:
        return len(self.dropped_lines)


def parse_records(text: str) -> ParsedRecords:
    """Parse ``time,code`` records into a WeibullDesign.

    Examples
    --------
    >>> parsed = parse_records("100,F\\n150,F\\n200,S\\n80,F")
    >>> parsed.design.failures
    array([100., 150.,  80.])
    >>> parsed.design.suspensions
    array([200.])
    """
    failures: list[float] = []
    suspensions: list[float] = []
    dropped: list[int] = []
    n_lines = 0

    for lineno, raw in enumerate(text.splitlines(), start=1):
        line = raw.strip()
        if not line:
            continue
        n_lines += 1

        fields = line.split(",")
        if len(fields) < 2:
            dropped.append(lineno)
            continue

        try:
            t = float(fields[0].strip())
        except ValueError:
            dropped.append(lineno)
            continue
        if not math.isfinite(t) or t < 0:
            dropped.append(lineno)
            continue

        code = fields[1].strip().upper()
        if code == FAILURE_CODE:
            failures.append(t)
        elif code == SUSPENSION_CODE:
            suspensions.append(t)
        else:
            dropped.append(lineno)

    return ParsedRecords(
        design=WeibullDesign.for_fit(failures, suspensions),
        n_lines=n_lines,
        dropped_lines=tuple(dropped),
    )


def format_records(design: WeibullDesign) -> str:
    """Inverse of parse_records: one ``time,code`` line per observation."""
    lines = [f"{t:g},{FAILURE_CODE}" for t in design.failures]
    lines += [f"{t:g},{SUSPENSION_CODE}" for t in design.suspensions]
    return "\n".join(lines)

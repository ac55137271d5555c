"""Report aggregation and schema-friendly output."""

from __future__ import annotations

from collections import Counter
from typing import Any


def aggregate(findings: list[dict[str, Any]], total_constraints: int) -> dict[str, Any]:
    """Aggregate constraint findings into a single report.

    Each finding is a dict with at least ``package``, ``constraint``,
    ``installed`` and ``kind`` keys. Findings are passed through unchanged;
    this computes totals, a per-kind breakdown and the top-level flag.
    """

    by_kind = Counter(str(f.get("kind")) for f in findings)

    report: dict[str, Any] = {
        "version": "1",
        "hasFindings": bool(findings),
        "findings": findings,
        "totals": {
            "constraints": total_constraints,
            "findings": len(findings),
            "byKind": dict(sorted(by_kind.items())),
        },
    }

    return report

"""Human-readable Markdown summary of a constraint check report."""

from __future__ import annotations

from typing import Any


def render_summary(report: dict[str, Any]) -> str:
    """Return a Markdown string with totals and a table of findings."""
    totals = report.get("totals", {})
    findings = report.get("findings", [])

    lines = []
    lines.append("# semrange Summary")
    lines.append("")
    lines.append(
        f"Total constraints: {totals.get('constraints', 0)} | Findings: {totals.get('findings', 0)}"
    )
    lines.append("")
    lines.append("| Package | Constraint | Installed | Problem |")
    lines.append("| --- | --- | --- | --- |")

    if not findings:
        lines.append("| (all constraints satisfied) | n/a | n/a | n/a |")

    for finding in findings:
        pkg = finding.get("package", "")
        constraint = finding.get("constraint", "")
        installed = finding.get("installed") or "n/a"
        lines.append(f"| {pkg} | `{constraint}` | {installed} | {_describe(finding)} |")

    return "\n".join(lines) + "\n"


def _describe(finding: dict[str, Any]) -> str:
    kind = finding.get("kind")
    if kind == "missing":
        return "not installed"
    if kind == "unsatisfied":
        return f"outside {finding.get('normalised', '')}"
    if kind in {"invalid-range", "invalid-version"}:
        return f"{kind}: {finding.get('message', '')} (column {finding.get('column', '?')})"
    return str(kind)

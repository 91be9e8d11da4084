"""Human-readable rendering of validation findings."""

from __future__ import annotations

from collections.abc import Sequence


def _present_diagnostics(diagnostics: Sequence[str]) -> str:
    return "\n".join("* " + diagnostic.replace("\n", "\n  ") + "\n" for diagnostic in diagnostics)


def render_report(
    errors: Sequence[str],
    warnings: Sequence[str],
    hints: Sequence[str],
) -> str:
    """Render one section per non-empty severity, most severe first.

    Each section reads ``Package validation found the following <n> <kind>:``
    followed by a bullet per diagnostic, multi-line diagnostics indented under
    their bullet. Returns an empty string when there is nothing to report.
    """
    sections: list[str] = []
    for kind, diagnostics in (
        ("error", errors),
        ("potential issue", warnings),
        ("hint", hints),
    ):
        if not diagnostics:
            continue
        s = "s" if len(diagnostics) > 1 else ""
        sections.append(
            f"Package validation found the following {len(diagnostics)} {kind}{s}:\n"
            f"{_present_diagnostics(diagnostics)}"
        )
    return "\n".join(sections)

"""Plain-text rendering of summary reports."""

from tithe.domain.entities import SummaryReport

COLUMN_WIDTH = 20


def render_summary(report: SummaryReport) -> list[str]:
    """Render a summary report as indented text lines.

    Each period gets a "<Month> <Year>" header, followed by its groups one
    tab in and each group's subgroups two tabs in. Group amounts sit one
    column further right than subgroup amounts.
    """
    lines = []
    for period in report.periods:
        lines.append(period.title)
        for group in period.groups:
            lines.append(
                f"\t{group.name:<{COLUMN_WIDTH}}{'':<{COLUMN_WIDTH}}{group.amount:<{COLUMN_WIDTH}}".rstrip()
            )
            for subgroup in group.subgroups:
                lines.append(
                    f"\t\t{subgroup.name:<{COLUMN_WIDTH}}{subgroup.amount:<{COLUMN_WIDTH}}".rstrip()
                )
    return lines

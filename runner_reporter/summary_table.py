"""Column-aligned execution summary table."""

from collections.abc import Sequence
from dataclasses import dataclass
from decimal import ROUND_HALF_UP, Context, Decimal

from runner_reporter.models.summary import ExecutionSummary

SUMMARY_HEADER = "=== TEST EXECUTION SUMMARY ==="
GRAND_TOTAL_LABEL = "GRAND TOTAL:"
ROW_INDENT = "   "
LABEL_GAP = "  "

COUNTER_COLUMNS: Sequence[tuple[str, str]] = (
    ("Total", "total"),
    ("Errors", "errors"),
    ("Failed", "failed"),
    ("Skipped", "skipped"),
)
TIME_COLUMN = "Time"

MILLISECONDS = Decimal("0.001")
DEFAULT_PRECISION = 28


@dataclass(frozen=True, kw_only=True)
class ColumnWidths:
    """Widths measured over every row before any row is rendered."""

    label: int
    counters: Sequence[int]
    time: int


def format_time(seconds: Decimal | float | int) -> str:
    """Seconds with exactly three decimals, rounded half away from zero."""
    if not isinstance(seconds, Decimal):
        seconds = Decimal(str(seconds))
    # Enough digits for every integer digit plus the three decimals.
    context = Context(prec=max(DEFAULT_PRECISION, seconds.adjusted() + 4))
    rounded = seconds.quantize(MILLISECONDS, rounding=ROUND_HALF_UP, context=context)
    return f"{rounded:f}s"


def grand_total(summaries: Sequence[ExecutionSummary]) -> ExecutionSummary:
    """Sum counters and times across assemblies."""
    return ExecutionSummary(
        total=sum(s.total for s in summaries),
        errors=sum(s.errors for s in summaries),
        failed=sum(s.failed for s in summaries),
        skipped=sum(s.skipped for s in summaries),
        time=sum((s.time for s in summaries), Decimal(0)),
    )


def rendered_values(summary: ExecutionSummary) -> Sequence[str]:
    """Text of every cell shown for a summary, counters first then time.

    A row that ran nothing shows its total only.
    """
    values = [str(getattr(summary, attr)) for _, attr in COUNTER_COLUMNS]
    if summary.total == 0:
        return values[:1]
    return [*values, format_time(summary.time)]


def compute_widths(
    rows: Sequence[tuple[str, ExecutionSummary]],
    total_row: ExecutionSummary | None = None,
) -> ColumnWidths:
    """Measure the label column and every value column.

    Args:
        rows: Labelled summaries, in display order
        total_row: Grand total, when it will be displayed

    Returns:
        Widths wide enough for every cell of every row

    """
    cells = [rendered_values(summary) for _, summary in rows]
    if total_row is not None:
        cells.append(rendered_values(total_row))

    def column_width(index: int) -> int:
        return max(
            (len(row[index]) for row in cells if len(row) > index), default=0
        )

    return ColumnWidths(
        label=max((len(label) for label, _ in rows), default=0),
        counters=[column_width(i) for i in range(len(COUNTER_COLUMNS))],
        time=column_width(len(COUNTER_COLUMNS)),
    )


def format_row(label: str, summary: ExecutionSummary, widths: ColumnWidths) -> str:
    """Render one assembly row using precomputed widths."""
    values = rendered_values(summary)
    cells = [
        f"{name}: {value.rjust(width)}"
        for (name, _), value, width in zip(COUNTER_COLUMNS, values, widths.counters)
    ]
    if len(values) > len(COUNTER_COLUMNS):
        cells.append(f"{TIME_COLUMN}: {values[-1].rjust(widths.time)}")
    return f"{ROW_INDENT}{label.ljust(widths.label)}{LABEL_GAP}{', '.join(cells)}"


def _column_gaps() -> Sequence[int]:
    """Width of the text that precedes each value column within a row."""
    names = [name for name, _ in COUNTER_COLUMNS] + [TIME_COLUMN]
    return [
        len(f"{name}: ") if i == 0 else len(f", {name}: ")
        for i, name in enumerate(names)
    ]


def format_separator(widths: ColumnWidths) -> str:
    """Dashes under every value column."""
    lead = " " * (len(ROW_INDENT) + widths.label + len(LABEL_GAP))
    columns = [*widths.counters, widths.time]
    return lead + "".join(
        " " * gap + "-" * width for gap, width in zip(_column_gaps(), columns)
    )


def format_grand_total(
    total_row: ExecutionSummary,
    clock_time: Decimal | float | int,
    widths: ColumnWidths,
) -> str:
    """Summed row, labelled so that its label ends where ``Total:`` ends."""
    first_gap, *gaps = _column_gaps()
    label_width = len(ROW_INDENT) + widths.label + len(LABEL_GAP) + first_gap - 1
    values = [str(getattr(total_row, attr)) for _, attr in COUNTER_COLUMNS]
    values.append(format_time(total_row.time))
    columns = [*widths.counters, widths.time]

    line = f"{GRAND_TOTAL_LABEL.rjust(label_width)} {values[0].rjust(columns[0])}"
    line += "".join(
        " " * gap + value.rjust(width)
        for gap, value, width in zip(gaps, values[1:], columns[1:])
    )
    return f"{line} ({format_time(clock_time)})"


def format_summary(
    summaries: Sequence[tuple[str, ExecutionSummary]],
    clock_time: Decimal | float | int,
) -> Sequence[str]:
    """Render the execution summary table.

    A separator and a grand total row follow the assembly rows only when more
    than one assembly is reported.
    """
    total_row = grand_total([s for _, s in summaries]) if len(summaries) > 1 else None
    widths = compute_widths(summaries, total_row)

    lines = ["", SUMMARY_HEADER]
    lines.extend(format_row(label, summary, widths) for label, summary in summaries)

    if total_row is not None:
        lines.append(format_separator(widths))
        lines.append(format_grand_total(total_row, clock_time, widths))

    return lines

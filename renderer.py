# renderer.py
"""
Text renderings of a result set.

- MARKDOWN_TABLE: header from the first record's columns, `---` separator,
  one line per record (`NULL` for missing/None cells), then `(N행)` footer.
- FLATTENED_FIRST_COLUMN: first column of each record, one per line. Used for
  EXPLAIN ANALYZE, which returns the whole plan tree as pre-formatted text.
"""
from typing import List, Optional

from models import RenderMode, ResultSet, Scalar, to_text

NO_ROWS = "결과 없음 (0행)"
NO_PLAN = "실행 계획 없음"
NULL = "NULL"


def _cell(value: Scalar) -> str:
    return NULL if value is None else to_text(value)


def to_markdown_table(rows: ResultSet) -> str:
    if not rows:
        return NO_ROWS

    columns: List[str] = list(rows[0].keys())
    lines = [
        "| " + " | ".join(columns) + " |",
        "|" + "|".join("---" for _ in columns) + "|",
    ]
    for row in rows:
        # a record missing a column still gets a cell
        lines.append("| " + " | ".join(_cell(row.get(col)) for col in columns) + " |")

    return "\n".join(lines) + f"\n\n({len(rows)}행)"


def to_flattened_text(rows: ResultSet) -> str:
    if not rows:
        return NO_PLAN

    out = []
    for row in rows:
        first = next(iter(row.values()), None)
        out.append("" if first is None else to_text(first))
    return "\n".join(out)


RENDERERS = {
    RenderMode.MARKDOWN_TABLE: to_markdown_table,
    RenderMode.FLATTENED_FIRST_COLUMN: to_flattened_text,
}


def render(rows: ResultSet, mode: RenderMode, empty: Optional[str] = None) -> str:
    if not rows and empty is not None:
        return empty
    return RENDERERS[mode](rows)

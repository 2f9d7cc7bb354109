# models.py
# Plain containers shared by the guard, executor, renderer and gateway.
from dataclasses import dataclass
from datetime import date, datetime, time
from decimal import Decimal
from enum import Enum
from typing import Dict, List, Optional, Union

Scalar = Optional[Union[str, int, float, bool, Decimal, date, datetime, time, bytes]]
Record = Dict[str, Scalar]
ResultSet = List[Record]


class RenderMode(Enum):
    MARKDOWN_TABLE = "markdown_table"
    FLATTENED_FIRST_COLUMN = "flattened_first_column"


@dataclass(frozen=True)
class OperationSpec:
    name: str
    allowed_verb: str
    failure_label: str
    render_mode: RenderMode
    wrap_prefix: str = ""
    empty_text: Optional[str] = None
    description: str = ""

    def build_statement(self, query: str) -> str:
        if self.wrap_prefix:
            return f"{self.wrap_prefix} {query}"
        return query


@dataclass(frozen=True)
class Rendered:
    text: str


@dataclass(frozen=True)
class Failed:
    label: str
    message: str

    @property
    def text(self) -> str:
        return f"{self.label}: {self.message}"


Outcome = Union[Rendered, Failed]


def to_text(value: Scalar) -> str:
    """Cell text for a non-null scalar."""
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, (bytes, bytearray)):
        return bytes(value).decode("utf-8", errors="replace")
    return str(value)

"""
Core data structures shared by the conversion engine.
"""

from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path
from typing import Optional


class LineMode(Enum):
    """Which kind of block the line-mode state machine is inside."""
    TEXT = "text"
    CODE = "code"
    TABLE = "table"


class ListItemType(Enum):
    """Kind of list the list reconstructor is currently inside."""
    NONE = ""
    UNORDERED = "unordered"
    ORDERED = "ordered"


@dataclass(frozen=True)
class Notice:
    """A non-fatal diagnostic about input that was not converted properly."""
    file: str
    line: int
    message: str

    def __str__(self) -> str:
        return f"{Path(self.file).name}:{self.line}. {self.message}"


@dataclass(frozen=True)
class LinkSpec:
    """Parsed ``[[target]]`` or ``[[target|label]]`` link."""
    target: str
    label: Optional[str] = None

    def __post_init__(self):
        if self.label is None:
            object.__setattr__(self, "label", self.target)


@dataclass(frozen=True)
class ImageSpec:
    """Parsed ``{{target}}`` or ``{{target|title}}`` image reference."""
    target: str
    title: str = ""


@dataclass(frozen=True)
class Relocation:
    """Copy of a wiki media file next to the converted document."""
    source_path: Path
    dest_path: Path


@dataclass
class ConversionContext:
    """
    Mutable state for converting a single document.

    Created fresh for every conversion call and never shared between
    documents.
    """
    source: str = "unknown"
    line_number: int = 0
    mode: LineMode = LineMode.TEXT
    list_item_type: ListItemType = ListItemType.NONE
    list_item_count: int = 1
    table: list[list[str]] = field(default_factory=list)
    notices: list[Notice] = field(default_factory=list)
    relocations: list[Relocation] = field(default_factory=list)

    def notice(self, message: str, line: Optional[int] = None) -> None:
        """Record a diagnostic against the current (or given) line."""
        self.notices.append(
            Notice(self.source, self.line_number if line is None else line, message)
        )


@dataclass
class ConversionResult:
    """Output of converting one document."""
    text: str
    notices: list[Notice] = field(default_factory=list)
    relocations: list[Relocation] = field(default_factory=list)

    @classmethod
    def from_context(cls, text: str, context: ConversionContext) -> "ConversionResult":
        return cls(
            text=text,
            notices=list(context.notices),
            relocations=list(context.relocations),
        )

# pdf_page_numbering/options.py
"""Formatting options for page numbering."""
from dataclasses import dataclass, asdict, replace
from enum import Enum
from typing import Any, Dict


class Position(str, Enum):
    HEADER = "header"
    FOOTER = "footer"


class Alignment(str, Enum):
    LEFT = "left"
    CENTER = "center"
    RIGHT = "right"


@dataclass(frozen=True)
class PageNumberOptions:
    """
    How and where page numbers are drawn.

    With skip_cover_pages disabled, cover_pages_to_skip and
    include_cover_in_total are ignored and every page gets a label.
    """
    position: Position = Position.FOOTER
    alignment: Alignment = Alignment.CENTER
    include_total_pages: bool = True
    start_page: int = 1
    font_size: float = 12
    skip_cover_pages: bool = False
    cover_pages_to_skip: int = 1
    include_cover_in_total: bool = True

    def __post_init__(self):
        # Accept plain strings coming from form widgets
        object.__setattr__(self, "position", Position(self.position))
        object.__setattr__(self, "alignment", Alignment(self.alignment))

        if self.font_size <= 0:
            raise ValueError(f"font_size must be positive, got {self.font_size}")
        if self.cover_pages_to_skip < 0:
            raise ValueError(
                f"cover_pages_to_skip must be non-negative, got {self.cover_pages_to_skip}"
            )

    def to_dict(self) -> Dict[str, Any]:
        data = asdict(self)
        data["position"] = self.position.value
        data["alignment"] = self.alignment.value
        return data

    def with_changes(self, **changes) -> "PageNumberOptions":
        return replace(self, **changes)

    @property
    def skipped_page_count(self) -> int:
        """Number of leading pages left without a label."""
        return self.cover_pages_to_skip if self.skip_cover_pages else 0

# text/attributes.py

from enum import Enum
from dataclasses import dataclass
from typing import Optional, TypeVar

from rich.color import ColorSystem
from rich.style import Style

from .color import Color

T = TypeVar("T")

def coalesce(first: Optional[T], second: Optional[T]) -> Optional[T]:
    """Return `first` unless it is None, otherwise `second`."""
    return first if first is not None else second

class Mode(Enum):
    """Rendering target for styled text."""
    TERMINAL = "terminal"
    MARKUP = "markup"

@dataclass(frozen=True)
class Attributes:
    """
    Style applied to a run of text.

    Attributes are plain values: two records with the same flags and
    colors compare equal and can be shared freely.
    """
    bold: bool = False
    invert: bool = False
    color: Optional[Color] = None
    background: Optional[Color] = None

    def merged(self, other: "Attributes") -> "Attributes":
        """
        Combine two attribute sets.

        Flags are OR'd. Colors are coalesced with `self` taking priority,
        so callers choose which side wins by argument order.
        """
        return Attributes(
            bold=self.bold or other.bold,
            invert=self.invert or other.invert,
            color=coalesce(self.color, other.color),
            background=coalesce(self.background, other.background),
        )

    def render(self, text: str) -> str:
        """Render text wrapped in terminal escape codes for this style."""
        return self.render_with_mode(text, Mode.TERMINAL)

    def render_with_mode(self, text: str, mode: Mode) -> str:
        if mode is Mode.MARKUP:
            return self._render_markup(text)
        return self._render_terminal(text)

    def to_rich_style(self) -> Style:
        """Build the equivalent rich Style."""
        return Style(
            bold=self.bold or None,
            reverse=self.invert or None,
            color=self.color.rich_name if self.color else None,
            bgcolor=self.background.rich_name if self.background else None,
        )

    def _render_terminal(self, text: str) -> str:
        # SGR order is bold, reverse, foreground, background
        return self.to_rich_style().render(text, color_system=ColorSystem.TRUECOLOR)

    def _render_markup(self, text: str) -> str:
        opening, closing = [], []
        if self.bold:
            opening.append("<b>")
            closing.append("</b>")
        if self.invert:
            opening.append("<invert>")
            closing.append("</invert>")
        if self.background is not None:
            opening.append(f"<bg:{self.background}>")
            closing.append(f"</bg:{self.background}>")
        if self.color is not None:
            opening.append(f"<fg:{self.color}>")
            closing.append(f"</fg:{self.color}>")
        return "".join(opening) + text + "".join(reversed(closing))

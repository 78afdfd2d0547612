# text/color.py

from enum import Enum


class Color(Enum):
    """
    Named terminal colors.

    Each member carries the display name used in markup output and the
    rich color name used for terminal output. The bright variants take the
    plain names; the standard 8 colors are the "Dark" ones.
    """
    BLACK = ("Black", "black")
    DARK_GREY = ("DarkGrey", "bright_black")
    RED = ("Red", "bright_red")
    DARK_RED = ("DarkRed", "red")
    GREEN = ("Green", "bright_green")
    DARK_GREEN = ("DarkGreen", "green")
    YELLOW = ("Yellow", "bright_yellow")
    DARK_YELLOW = ("DarkYellow", "yellow")
    BLUE = ("Blue", "bright_blue")
    DARK_BLUE = ("DarkBlue", "blue")
    MAGENTA = ("Magenta", "bright_magenta")
    DARK_MAGENTA = ("DarkMagenta", "magenta")
    CYAN = ("Cyan", "bright_cyan")
    DARK_CYAN = ("DarkCyan", "cyan")
    WHITE = ("White", "bright_white")
    GREY = ("Grey", "white")

    def __init__(self, label: str, rich_name: str):
        self.label = label
        self.rich_name = rich_name

    def __str__(self) -> str:
        return self.label

    @classmethod
    def parse(cls, name: str) -> "Color":
        """Look a color up by display name ("DarkBlue") or member name ("DARK_BLUE")."""
        key = name.strip().replace("_", "").replace(" ", "").lower()
        for color in cls:
            if color.label.lower() == key:
                return color
        raise ValueError(f"Unknown color '{name}'")

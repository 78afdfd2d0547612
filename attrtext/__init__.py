# __init__.py

from .logger import Logger
from .buffer import Buffer
from .errors import OutputError, WriteError, FlushError
from .text import (
    Attributed,
    Attributes,
    Color,
    Span,
    merge,
    render,
    render_with_offset,
)

__all__ = [
    "Attributed",
    "Attributes",
    "Buffer",
    "Color",
    "FlushError",
    "Logger",
    "OutputError",
    "Span",
    "WriteError",
    "merge",
    "render",
    "render_with_offset",
]

# text/__init__.py

from .color import Color
from .attributes import Attributes, Mode
from .spans import (
    Attributed,
    Span,
    merge,
    render,
    render_with_offset,
    sort_spans,
)

__all__ = [
    'Attributed',
    'Attributes',
    'Color',
    'Mode',
    'Span',
    'merge',
    'render',
    'render_with_offset',
    'sort_spans',
]

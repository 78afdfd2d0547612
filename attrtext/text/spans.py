# text/spans.py

import heapq
from itertools import count
from operator import itemgetter
from dataclasses import dataclass, field, replace
from typing import Iterable, List, Optional, Sequence, Tuple

from .attributes import Attributes, Mode

@dataclass(frozen=True)
class Span:
    """
    A half-open byte range [start, end) of some text and the attributes
    applied to it. Offsets are UTF-8 byte offsets.
    """
    start: int
    end: int
    attrs: Attributes = field(default_factory=Attributes)

    def __post_init__(self):
        if self.start < 0 or self.end < self.start:
            raise ValueError(f"Invalid span [{self.start}, {self.end})")

    @property
    def range(self) -> range:
        return range(self.start, self.end)

    def sort_key(self) -> Tuple[int, int]:
        """Spans order by start, then by end."""
        return (self.start, self.end)

    def length(self) -> int:
        return self.end - self.start

    def is_empty(self) -> bool:
        return self.start == self.end

    def overlaps(self, other: "Span") -> bool:
        return self.end > other.start and other.end > self.start

    def with_range(self, start: int, end: int) -> "Span":
        return replace(self, start=start, end=end)

    def shifted(self, delta: int) -> "Span":
        return self.with_range(self.start + delta, self.end + delta)


def sort_spans(spans: Iterable[Span]) -> List[Span]:
    """Return spans sorted by (start, end); equal ranges keep their order."""
    return sorted(spans, key=Span.sort_key)


def _fold(contributors: Tuple[Tuple[int, Attributes], ...]) -> Attributes:
    attrs = contributors[0][1]
    for _, other in contributors[1:]:
        attrs = attrs.merged(other)
    return attrs


def merge(a: Sequence[Span], b: Sequence[Span]) -> List[Span]:
    """
    Merge two span lists into a sorted list of disjoint spans.

    Pieces covered by a single input span keep its attributes. Pieces
    covered by several spans get their attributes merged, with colors
    taken from the span that comes first in (start, end) order; spans of
    `a` come before spans of `b` when their ranges are equal.
    """
    seq = count()
    work: list = []

    # Each piece carries the (rank, attrs) of every input span covering it,
    # ordered by rank. Rank is the position of the input span in sorted order.
    def push(span: Span, contributors: Tuple[Tuple[int, Attributes], ...]) -> None:
        heapq.heappush(work, (span.start, span.end, contributors[0][0], next(seq), span, contributors))

    for rank, span in enumerate(sort_spans([*a, *b])):
        push(span, ((rank, span.attrs),))

    merged: List[Span] = []
    while work:
        *_, first, first_by = heapq.heappop(work)
        if not work:
            merged.append(first)
            break

        second = work[0][4]
        if not first.overlaps(second):
            merged.append(first)
            continue
        *_, second, second_by = heapq.heappop(work)

        if first.start < second.start:
            merged.append(first.with_range(first.start, second.start))
            first = first.with_range(second.start, first.end)

        end = min(first.end, second.end)
        by = tuple(heapq.merge(first_by, second_by, key=itemgetter(0)))
        push(Span(second.start, end, _fold(by)), by)

        # Whichever piece runs past the overlap keeps its own contributors
        if first.end > end:
            push(first.with_range(end, first.end), first_by)
        elif second.end > end:
            push(second.with_range(end, second.end), second_by)

    return merged


def render(text: str, spans: Sequence[Span]) -> str:
    """Render text for the terminal with the given spans applied."""
    return render_with_mode(text, spans, Mode.TERMINAL)


def render_with_offset(text: str, offset: int, spans: Sequence[Span]) -> str:
    """
    Render a window of a larger buffer for the terminal.

    `text` starts at byte `offset` of the buffer the spans refer to.
    """
    return render_with_options(text, offset, spans, Mode.TERMINAL)


def render_with_mode(text: str, spans: Sequence[Span], mode: Mode) -> str:
    return render_with_options(text, 0, spans, mode)


def render_with_options(text: str, offset: int, spans: Sequence[Span], mode: Mode) -> str:
    """
    Interleave unstyled runs of `text` with runs styled by `spans`.

    Spans ending before `offset` are skipped and the rest are clipped to
    the window. Slices must fall on code point boundaries or decoding
    raises UnicodeDecodeError.
    """
    data = text.encode("utf-8")
    length = len(data)
    x = 0
    parts = []
    for span in sort_spans(spans):
        if span.end < offset:
            continue
        start = min(max(offset, span.start) - offset, length)
        if start > x:
            parts.append(data[x:start].decode("utf-8"))
        end = min(span.end - offset, length)
        if end > start:
            parts.append(span.attrs.render_with_mode(data[start:end].decode("utf-8"), mode))
        x = end
    if x < length:
        parts.append(data[x:].decode("utf-8"))
    return "".join(parts)


class Attributed:
    """
    Text together with the spans that style it.

    Spans may be stored in any order; they are sorted when rendering.
    """
    def __init__(self, text: str = "", spans: Optional[Iterable[Span]] = None):
        self._text = text
        self._spans: List[Span] = list(spans) if spans is not None else []

    def __len__(self) -> int:
        """Length of the text in bytes."""
        return len(self._text.encode("utf-8"))

    def __repr__(self) -> str:
        return f"Attributed(text={self._text!r}, spans={self._spans!r})"

    @property
    def text(self) -> str:
        return self._text

    @property
    def spans(self) -> Tuple[Span, ...]:
        return tuple(self._spans)

    def spans_mut(self) -> List[Span]:
        """Return the live span list for in-place edits."""
        return self._spans

    def render(self) -> str:
        return self.render_with_mode(Mode.TERMINAL)

    def render_with_mode(self, mode: Mode) -> str:
        return render_with_mode(self._text, self._spans, mode)

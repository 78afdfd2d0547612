# buffer.py

import sys
from typing import List, Optional, Sequence, TextIO, Union

from .errors import FlushError, WriteError
from .logger import Logger
from .text import Attributed, Span, render_with_offset

class Buffer:
    """
    Accumulates output text and writes it to a terminal stream in one go.

    Text is collected with push/push_str/write and emitted by flush, which
    clears the buffer once the stream has accepted everything.
    """
    def __init__(self, stream: Optional[TextIO] = None, logger: Optional[Logger] = None):
        """
        Args:
            stream: Stream to flush to. Defaults to sys.stdout at flush time.
            logger: Logger for flush activity and failures.
        """
        self._data: List[str] = []
        self._stream = stream
        self.logger = logger or Logger(__name__)

    def __len__(self) -> int:
        return len(self.text())

    def text(self) -> str:
        """Return everything buffered so far."""
        return "".join(self._data)

    def lines(self) -> List[str]:
        return self.text().splitlines()

    def clear(self) -> None:
        self._data.clear()

    def push(self, char: str) -> None:
        if len(char) != 1:
            raise ValueError(f"Expected a single character, got {char!r}")
        self._data.append(char)

    def push_str(self, text: str) -> None:
        if text:
            self._data.append(text)

    def push_attributed(self, attributed: Attributed) -> None:
        """Render styled text for the terminal and buffer the result."""
        self.push_str(attributed.render())

    def push_rendered(self, text: str, spans: Sequence[Span], offset: int = 0) -> None:
        """Render a window of styled text starting at byte `offset` and buffer it."""
        self.push_str(render_with_offset(text, offset, spans))

    def write(self, data: Union[str, bytes]) -> int:
        """
        Buffer text, accepting either str or UTF-8 encoded bytes.

        Returns the number of characters or bytes accepted.
        """
        if isinstance(data, (bytes, bytearray)):
            try:
                text = bytes(data).decode("utf-8")
            except UnicodeDecodeError as e:
                self.logger.error(f"Rejected non UTF-8 write of {len(data)} bytes: {e}")
                raise WriteError("Buffer only accepts UTF-8 text") from e
        else:
            text = data
        self.push_str(text)
        return len(data)

    def flush(self) -> None:
        """
        Write the buffered text to the stream and clear the buffer.

        The buffer is cleared as soon as the stream accepts the text, so a
        failure in the stream's own flush does not resend it. If the write
        itself fails the text is kept for a retry; a stream that wrote part
        of it before failing will see that part again.
        """
        stream = self._stream if self._stream is not None else sys.stdout
        out = self.text()
        try:
            stream.write(out)
        except OSError as e:
            self.logger.error(f"Write to stream failed: {e}")
            raise FlushError(f"Could not write output: {e}") from e
        self.clear()
        try:
            stream.flush()
        except OSError as e:
            self.logger.error(f"Stream flush failed: {e}")
            raise FlushError(f"Could not flush output: {e}") from e
        self.logger.debug(f"Flushed {len(out)} characters")

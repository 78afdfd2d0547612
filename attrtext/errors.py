# errors.py


class OutputError(Exception):
    """Base class for failures raised by the output buffer."""


class WriteError(OutputError):
    """Data handed to the buffer could not be decoded as UTF-8."""


class FlushError(OutputError):
    """The underlying stream failed while the buffer was being flushed."""

# nice_style/exceptions.py
#
# Error taxonomy for the styling layer. Every error is raised at the point the
# invalid input is seen and propagates to the caller unchanged.


class NiceStyleError(Exception):
    """Base class for all errors raised by nice_style."""


class InvalidConfiguration(NiceStyleError, ValueError):
    """An option is outside its recognised set (legend position, chart type, logo flag...)."""


class UnknownColourName(NiceStyleError, KeyError):
    """A colour name is not in the brand colour table."""

    def __str__(self) -> str:
        # KeyError repr()s its argument; keep the plain message.
        return str(self.args[0]) if self.args else ""


class IndexOutOfRange(NiceStyleError, IndexError):
    """A primary palette index is outside [0, len(PRIMARY_PALETTE))."""

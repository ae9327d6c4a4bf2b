"""Split one chunk of input into the spans that get written between stamps."""
import typing

NEWLINE = b'\n'


class FlushUnit(typing.NamedTuple):
    start: int
    end: int
    # the span's last byte is a newline, so whatever follows starts a new line
    ends_line: bool


def flush_units(chunk, end=None) -> typing.Iterator[FlushUnit]:
    """Yield the flush units of `chunk[:end]`, in order.

    Every newline closes a unit. Bytes after the last newline make one final
    unit that doesn't end its line; the line carries on into the next chunk.
    """
    if end is None:
        end = len(chunk)

    start = 0
    while start < end:
        newline = chunk.find(NEWLINE, start, end)
        if newline == -1:
            yield FlushUnit(start, end, False)
            return
        yield FlushUnit(start, newline + 1, True)
        start = newline + 1

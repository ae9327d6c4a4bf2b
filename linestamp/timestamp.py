"""
Render the stamp that goes in front of each line.

The format is strftime(3)'s, applied to the local time, e.g. the default:

    %c   ->   Mon Oct 19 17:43:37 2026

Formats are capped at FORMAT_CAPACITY - 1 characters and rendered stamps at
STAMP_CAPACITY - 1 bytes. Anything longer is cut off, silently.
"""
import time
from datetime import datetime

DEFAULT_FORMAT = '%c '
FORMAT_CAPACITY = 256
STAMP_CAPACITY = FORMAT_CAPACITY * 2


def truncate_format(fmt: str) -> str:
    return fmt[:FORMAT_CAPACITY - 1]


def render(fmt: str, when: float) -> bytes:
    """`when` (seconds since the epoch) as local time, formatted by `fmt`"""
    # formats from argv carry undecodable bytes as surrogates; write them back out raw
    stamp = datetime.fromtimestamp(when).strftime(fmt).encode('UTF-8', 'surrogateescape')
    return stamp[:STAMP_CAPACITY - 1]


class Stamp:
    """Renders the current time on each call; this is what goes before every line."""

    def __init__(self, fmt: str = DEFAULT_FORMAT, clock=time.time):
        self.format = truncate_format(fmt)
        self.clock = clock

    def __call__(self) -> bytes:
        return render(self.format, self.clock())

    def __repr__(self):
        return f'{type(self).__name__}({self.format!r})'

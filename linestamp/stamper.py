"""Copy a byte stream to an output stream, stamping the start of every line."""
import enum
import typing

from .debug import debug
from .debug import trace
from .errors import LinestampUserMessage
from .errors import NoBuffer
from .errors import ReadFailure
from .errors import WriteFailure
from .functions import describe_oserror
from .functions import fd_name
from .functions import print_stderr
from .functions import write_all
from .scanner import flush_units

BUFFER_SIZE = 32 * 1024
CHANNEL = '[linestamp]'


class ExitStatus(enum.IntEnum):
    SUCCESS = 0
    FAILURE = 1


class StreamStamper:
    """Reads `infile` in chunks and writes it to `outfile`, calling `stamp` for
    the bytes to put in front of each line.

    `pending_stamp` is the only state carried from one chunk to the next: it
    is true when the next byte written starts a line.
    """

    def __init__(self, stamp: typing.Callable[[], bytes], buffer_size: int = BUFFER_SIZE):
        self.stamp = stamp
        self.buffer_size = buffer_size
        self.pending_stamp = True

    def run(self, infile, outfile) -> ExitStatus:
        """Stamp `infile` onto `outfile` until end of stream.

        Failures are reported on stderr and end the run.
        """
        try:
            self.copy(infile, outfile)
        except LinestampUserMessage as error:
            # we don't need or want a stack trace for I/O errors
            print_stderr(f'{CHANNEL} ERROR: {error}')
            return ExitStatus.FAILURE
        else:
            return ExitStatus.SUCCESS

    def copy(self, infile, outfile):
        try:
            buffer = bytearray(self.buffer_size)
        except MemoryError:
            raise NoBuffer('Could not allocate read buffer of %d bytes' % self.buffer_size)

        self.pending_stamp = True
        total = 0
        view = memoryview(buffer)
        while True:
            size = self._read(infile, view)
            if not size:
                debug('end of stream after %d bytes', total)
                return
            trace('read %d bytes', size)
            total += size

            for unit in flush_units(buffer, size):
                if self.pending_stamp:
                    self._write_stamp(outfile)
                self._write(outfile, view[unit.start:unit.end])
                self.pending_stamp = unit.ends_line

    def _read(self, infile, view):
        try:
            return infile.readinto(view)
        except OSError as error:
            raise ReadFailure('Could not read from %s because: %s' % (
                fd_name(infile), describe_oserror(error),
            ))

    def _write_stamp(self, outfile):
        try:
            write_all(outfile, self.stamp())
        except OSError as error:
            raise WriteFailure('Could not write stamp to %s because: %s' % (
                fd_name(outfile), describe_oserror(error),
            ))

    def _write(self, outfile, span):
        try:
            write_all(outfile, span)
        except OSError as error:
            raise WriteFailure('Could not write stdin to stdout because: %s' % describe_oserror(error))

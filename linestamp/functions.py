"""miscellany linestamp functions"""
import errno
import os
import sys


class StreamFileDescriptor:
    """For some reason, Python neglected to put this in the standard lib."""
    STDIN = 0
    STDOUT = 1
    STDERR = 2


def print_stderr(s):
    # Sadness: https://bugs.python.org/issue13601
    print(s, file=sys.stderr)
    sys.stderr.flush()


def write_all(outfile, data):
    """Write all of `data`, continuing after short writes.

    Unbuffered files may accept only part of a write. A write that accepts
    nothing at all is an EIO.
    """
    view = memoryview(data)
    while view:
        written = outfile.write(view)
        if not written:
            raise OSError(errno.EIO, os.strerror(errno.EIO))
        view = view[written:]


def describe_oserror(error):
    """the system error text of an OSError, like strerror(3)"""
    return error.strerror or str(error)


def fd_name(stream):
    """name a stream the way diagnostics do: by its file descriptor, when it has one"""
    try:
        return 'fd(%d)' % stream.fileno()
    except (OSError, ValueError):
        return repr(stream)

import argparse
import io

import contextlib2
from cached_property import cached_property
from frozendict import frozendict

from .debug import debug
from .functions import StreamFileDescriptor
from .stamper import StreamStamper
from .timestamp import DEFAULT_FORMAT
from .timestamp import Stamp
from linestamp import __version__


LINESTAMP_DEFAULTS = frozendict({
    # strftime(3) format of the stamp in front of every line
    'format': DEFAULT_FORMAT,
})
DESCRIPTION = '''\
Reads stdin and sends it to stdout while prefixing each line with
a timestamp.'''
VERSION_BANNER = '''\
%(prog)s {}

Copyright 2010 by Dirk Dierckx <dirk.dierckx@gmail.com>
This is free software; see the source for copying conditions.
There is NO warranty; not even for MERCHANTABILITY or FITNESS
FOR A PARTICULAR PURPOSE.'''.format(__version__)


def open_stdio(fd, mode):
    """An unbuffered binary file over one of the standard streams, which stays open after we're done."""
    return io.open(fd, mode=mode, buffering=0, closefd=False)


class LinestampApp:

    def __init__(self, config=LINESTAMP_DEFAULTS):
        self.conf = frozendict(config)

    @cached_property
    def stamp(self):
        return Stamp(self.conf['format'])

    def __call__(self, infile=None, outfile=None):
        """Run the app: stamp stdin onto stdout, or the given binary files."""
        with contextlib2.ExitStack() as context:
            if infile is None:
                infile = context.enter_context(open_stdio(StreamFileDescriptor.STDIN, 'rb'))
            if outfile is None:
                outfile = context.enter_context(open_stdio(StreamFileDescriptor.STDOUT, 'wb'))

            debug('stamping with %r', self.stamp)
            return StreamStamper(self.stamp).run(infile, outfile)


def parser():
    parser = argparse.ArgumentParser(
        prog='linestamp',
        description=DESCRIPTION,
        formatter_class=argparse.RawDescriptionHelpFormatter,
        add_help=False,
    )

    output = parser.add_argument_group('Output')
    output.add_argument(
        '-f', '--format',
        metavar='FORMAT',
        # argparse %-formats help strings itself
        help='format of timestamp (see strftime), default: %r' % DEFAULT_FORMAT.replace('%', '%%'),
        default=argparse.SUPPRESS,
    )

    misc = parser.add_argument_group('Miscellaneous')
    misc.add_argument(
        '-V', '--version',
        action='version', version=VERSION_BANNER,
        help='print version information and exit',
    )
    misc.add_argument(
        '-h', '--help',
        action='help',
        help='display this help and exit',
    )

    return parser


def main(argv=None):
    p = parser()
    args = p.parse_args(argv)
    config = dict(LINESTAMP_DEFAULTS, **vars(args))

    app = LinestampApp(config)

    return int(app())


if __name__ == '__main__':
    exit(main())

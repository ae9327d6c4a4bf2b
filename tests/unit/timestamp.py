# pylint:disable=no-self-use
import time

import pytest

from linestamp.timestamp import DEFAULT_FORMAT
from linestamp.timestamp import FORMAT_CAPACITY
from linestamp.timestamp import render
from linestamp.timestamp import Stamp
from linestamp.timestamp import STAMP_CAPACITY
from linestamp.timestamp import truncate_format

# 2015-10-19 17:43:37 UTC
WHEN = 1445276617.0


class DescribeRender:

    def it_formats_local_time(self):
        expected = time.strftime('%Y-%m-%d %H:%M:%S', time.localtime(WHEN))
        assert render('%Y-%m-%d %H:%M:%S', WHEN) == expected.encode('UTF-8')

    def it_renders_the_default_like_ctime(self):
        expected = time.strftime('%c ', time.localtime(WHEN))
        assert render(DEFAULT_FORMAT, WHEN) == expected.encode('UTF-8')

    def it_passes_plain_text_through(self):
        assert render('>> ', WHEN) == b'>> '

    def it_renders_nothing_for_an_empty_format(self):
        assert render('', WHEN) == b''

    def it_encodes_as_utf8(self):
        assert render('\N{SNOWMAN} ', WHEN) == '\N{SNOWMAN} '.encode('UTF-8')

    def it_writes_undecodable_format_bytes_back_out(self):
        fmt = b'\xff '.decode('UTF-8', 'surrogateescape')
        assert render(fmt, WHEN) == b'\xff '

    def it_bounds_the_stamp(self):
        stamp = render('%Y' * (FORMAT_CAPACITY - 1), WHEN)
        assert len(stamp) == STAMP_CAPACITY - 1
        year = time.strftime('%Y', time.localtime(WHEN)).encode('UTF-8')
        assert stamp == (year * (FORMAT_CAPACITY - 1))[:STAMP_CAPACITY - 1]


class DescribeTruncateFormat:

    def it_keeps_short_formats(self):
        assert truncate_format('%c ') == '%c '

    @pytest.mark.parametrize(('length', 'expected'), [
        (FORMAT_CAPACITY - 2, FORMAT_CAPACITY - 2),
        (FORMAT_CAPACITY - 1, FORMAT_CAPACITY - 1),
        (FORMAT_CAPACITY, FORMAT_CAPACITY - 1),
        (FORMAT_CAPACITY * 10, FORMAT_CAPACITY - 1),
    ])
    def it_cuts_long_formats_to_capacity(self, length, expected):
        assert len(truncate_format('x' * length)) == expected

    def it_keeps_the_beginning(self):
        fmt = 'a' * (FORMAT_CAPACITY - 1) + 'bbb'
        assert truncate_format(fmt) == 'a' * (FORMAT_CAPACITY - 1)


class DescribeStamp:

    def it_renders_the_clock(self):
        stamp = Stamp('%Y ', clock=lambda: WHEN)
        assert stamp() == time.strftime('%Y ', time.localtime(WHEN)).encode('UTF-8')

    def it_reads_the_clock_every_time(self):
        times = iter((WHEN, WHEN + 366 * 24 * 60 * 60))
        stamp = Stamp('%Y', clock=lambda: next(times))
        assert int(stamp()) + 1 == int(stamp())

    def it_truncates_its_format(self):
        stamp = Stamp('x' * 1000)
        assert stamp.format == 'x' * (FORMAT_CAPACITY - 1)
        assert stamp() == b'x' * (FORMAT_CAPACITY - 1)

    def it_defaults_to_ctime_format(self):
        assert Stamp().format == DEFAULT_FORMAT
        assert repr(Stamp()) == "Stamp('%c ')"

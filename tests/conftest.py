# pylint:disable=redefined-outer-name,unused-argument
import os
from unittest import mock

import pytest

TOP = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))


@pytest.fixture(autouse=True)
def isolated_environ():
    """no $LINESTAMP_VERBOSE noise, and a fixed width for argparse's help"""
    environ = {
        key: value
        for key, value in os.environ.items()
        if not key.startswith('LINESTAMP_')
    }
    environ['COLUMNS'] = '80'
    # subprocesses import linestamp from this checkout
    environ['PYTHONPATH'] = os.pathsep.join(
        path for path in (TOP, environ.get('PYTHONPATH')) if path
    )
    with mock.patch.dict(os.environ, environ, clear=True):
        yield


@pytest.fixture
def in_tmpdir(tmpdir):
    with tmpdir.as_cwd():
        yield tmpdir

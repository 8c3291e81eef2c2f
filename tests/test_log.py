import io

import pytest

from gremlins import log


@pytest.fixture(autouse=True)
def _clean_logger():
    log.reset()
    yield
    log.reset()


def test_uninitialised_writes_nothing():
    out = io.StringIO()
    err = io.StringIO()
    log.init(out, err)
    log.reset()

    log.infof("%s", "test")
    log.infoln("test")
    log.errorf("%s", "test")
    log.errorln("test")

    assert out.getvalue() == ""
    assert err.getvalue() == ""


def test_infof():
    out = io.StringIO()
    log.init(out, io.StringIO())

    log.infof("test %d", 1)

    assert out.getvalue() == "test 1"


def test_infoln():
    out = io.StringIO()
    log.init(out, io.StringIO())

    log.infoln("test test")

    assert out.getvalue() == "test test\n"


def test_errorf():
    out = io.StringIO()
    err = io.StringIO()
    log.init(out, err)

    log.errorf("test %d", 1)

    assert err.getvalue() == "ERROR: test 1"
    assert out.getvalue() == ""


def test_errorln():
    out = io.StringIO()
    err = io.StringIO()
    log.init(out, err)

    log.errorln("test test")

    assert err.getvalue() == "ERROR: test test\n"
    assert out.getvalue() == ""


def test_silent_mode():
    out = io.StringIO()
    err = io.StringIO()
    log.init(out, err, silent=True)

    log.infof("%s", "test")
    log.infoln("test")
    log.errorf("%s\n", "test")
    log.errorln("test")

    assert out.getvalue() == ""
    assert err.getvalue() == "ERROR: test\nERROR: test\n"


def test_set_silent_toggles_info_output():
    out = io.StringIO()
    log.init(out, io.StringIO())

    log.set_silent(True)
    log.infoln("hidden")
    log.set_silent(False)
    log.infoln("shown")

    assert out.getvalue() == "shown\n"


def test_init_without_stream_is_ignored():
    out = io.StringIO()
    log.init(None, io.StringIO())
    log.init(out, io.StringIO())

    log.infoln("test")

    assert out.getvalue() == "test\n"


def test_second_init_is_ignored():
    first = io.StringIO()
    second = io.StringIO()
    log.init(first, io.StringIO())
    log.init(second, io.StringIO())

    log.infoln("test")

    assert first.getvalue() == "test\n"
    assert second.getvalue() == ""


def test_format_without_args_keeps_percent():
    out = io.StringIO()
    log.init(out, io.StringIO())

    log.infof("100%")

    assert out.getvalue() == "100%"
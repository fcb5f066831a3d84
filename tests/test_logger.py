import pytest

from dotx import logger
from dotx.logger import Level


@pytest.fixture(autouse=True)
def _reset_level():
    logger.set_level(Level.INFO)
    yield
    logger.set_level(Level.INFO)


def test_info_is_written_to_stderr(capsys):
    logger.info("successfully added", dotfile=".bashrc")
    captured = capsys.readouterr()
    assert "successfully added" in captured.err
    assert "dotfile=.bashrc" in captured.err
    assert captured.out == ""


def test_level_label_is_upper_case_name(capsys):
    logger.warn("careful")
    err = capsys.readouterr().err
    assert err.split()[0] == str(Level.WARN).upper()


def test_debug_hidden_by_default(capsys):
    logger.debug("hidden message")
    assert "hidden message" not in capsys.readouterr().err


def test_set_level_debug_shows_debug(capsys):
    logger.set_level(Level.DEBUG)
    logger.debug("now visible")
    assert "now visible" in capsys.readouterr().err


def test_set_level_error_hides_warnings(capsys):
    logger.set_level(Level.ERROR)
    logger.warn("quiet warning")
    logger.info("quiet info")
    assert capsys.readouterr().err == ""


def test_error_exits_with_status_one(capsys):
    with pytest.raises(SystemExit) as excinfo:
        logger.error("failed to move", error="boom")
    assert excinfo.value.code == 1
    err = capsys.readouterr().err
    assert "failed to move" in err
    assert "error=boom" in err


def test_values_with_spaces_are_quoted(capsys):
    logger.info("msg", error="some thing")
    assert 'error="some thing"' in capsys.readouterr().err


@pytest.mark.parametrize(
    "log, label",
    [
        (logger.debug, "DEBUG"),
        (logger.info, "INFO"),
        (logger.warn, "WARN"),
    ],
)
def test_level_labels_in_output(capsys, log, label):
    logger.set_level(Level.DEBUG)
    log("labelled")
    assert capsys.readouterr().err.split()[0] == label


def test_error_label_in_output(capsys):
    with pytest.raises(SystemExit):
        logger.error("labelled")
    assert capsys.readouterr().err.split()[0] == "ERROR"


def test_warn_level_hides_info_but_shows_warn(capsys):
    logger.set_level(Level.WARN)
    logger.info("info line")
    logger.warn("warn line")
    err = capsys.readouterr().err
    assert "info line" not in err
    assert "warn line" in err
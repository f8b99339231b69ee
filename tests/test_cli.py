"""
Tests for the move-perfdata command-line interface.
"""

import errno
import logging
import re
import sys
import time
from pathlib import Path
from unittest.mock import patch

import pytest

from perfrouter.cli.main import (
    LOG_DATE_FORMAT,
    LOG_FORMAT,
    NO_ARGUMENTS_MESSAGE,
    main_cli,
    parse_arguments,
    setup_logging,
)
from perfrouter.models import Category, ExitStatus
from perfrouter.validation import UsageError


class TestParseArguments:
    """Argument parsing and validation."""

    def test_valid_arguments(self):
        assert parse_arguments(["-c", "host", "-t", "1543412003"]) == (Category.HOST, 1543412003)
        assert parse_arguments(["-t", "0", "-c", "service"]) == (Category.SERVICE, 0)

    def test_attached_values(self):
        assert parse_arguments(["-chost", "-t1543412003"]) == (Category.HOST, 1543412003)

    @pytest.mark.parametrize("argv", [[], ["host"], ["-"], ["1543412003", "-c", "host"]])
    def test_no_arguments(self, argv):
        with pytest.raises(UsageError) as exc_info:
            parse_arguments(argv)

        assert str(exc_info.value) == NO_ARGUMENTS_MESSAGE

    @pytest.mark.parametrize("value", ["Host", "hosts", "services", "", "all"])
    def test_invalid_category(self, value):
        with pytest.raises(UsageError) as exc_info:
            parse_arguments(["-c", value, "-t", "1"])

        assert str(exc_info.value) == "The value for -c must be 'service' or 'host'."

    @pytest.mark.parametrize("value", ["-1", "abc", "1.5", "12a", ""])
    def test_invalid_timestamp(self, value):
        with pytest.raises(UsageError) as exc_info:
            parse_arguments(["-c", "host", "-t", value])

        assert str(exc_info.value) == "The value you supplied for timestamp -t isn't a number."

    def test_unknown_flag(self):
        with pytest.raises(UsageError) as exc_info:
            parse_arguments(["-c", "host", "-x", "-t", "1"])

        assert str(exc_info.value) == "Invalid: -x"

    @pytest.mark.parametrize("argv", [["-h"], ["--help"], ["--category=host"]])
    def test_no_other_flags(self, argv):
        with pytest.raises(UsageError, match="^Invalid: "):
            parse_arguments(argv)

    @pytest.mark.parametrize("argv,flag", [
        (["-c", "host", "-t"], "-t"),
        (["-c"], "-c"),
        (["-t", "-c", "host"], "-t"),
    ])
    def test_missing_value(self, argv, flag):
        with pytest.raises(UsageError) as exc_info:
            parse_arguments(argv)

        assert str(exc_info.value) == f"{flag} missing argument."

    @pytest.mark.parametrize("argv,flag", [(["-c", "host"], "-t"), (["-t", "1"], "-c")])
    def test_missing_option(self, argv, flag):
        with pytest.raises(UsageError) as exc_info:
            parse_arguments(argv)

        assert exc_info.value.field_name == flag

    def test_positional_argument(self):
        with pytest.raises(UsageError, match="Unexpected argument: extra"):
            parse_arguments(["-c", "host", "-t", "1", "extra"])


class TestMainCli:
    """Process-level behaviour of main_cli."""

    @pytest.mark.parametrize("argv,message", [
        ([], NO_ARGUMENTS_MESSAGE + " Exiting."),
        (["-c", "bogus", "-t", "1"], "The value for -c must be 'service' or 'host'. Exiting."),
        (["-c", "host", "-t", "-5"], "The value you supplied for timestamp -t isn't a number. Exiting."),
        (["-c", "host"], "Missing required option -t [timestamp]."),
        (["-c", "host", "-q"], "Invalid: -q"),
        (["-c", "host", "-t"], "-t missing argument."),
    ])
    def test_usage_errors_exit_1_without_touching_files(self, argv, message, make_config, write_live_file, layout, caplog):
        config = make_config()
        live_file = write_live_file("host", b"x")

        with pytest.raises(SystemExit) as exc_info:
            main_cli(argv, config=config)

        assert exc_info.value.code == ExitStatus.USAGE_ERROR
        assert live_file.read_bytes() == b"x"
        assert layout.files_in(config.spool_a_dir) == []
        assert layout.files_in(config.spool_b_dir) == []
        assert caplog.records[-1].levelno == logging.ERROR
        assert caplog.records[-1].getMessage() == message

    def test_success_returns_normally(self, make_config, write_live_file):
        config = make_config()
        write_live_file("service", b"data\n")

        main_cli(["-c", "service", "-t", "1543412003"], config=config)

        assert (config.spool_a_dir / "service_perfdata.1543412003").read_bytes() == b"data\n"
        assert (config.spool_b_dir / "service_perfdata.1543412003").read_bytes() == b"data\n"

    def test_no_live_file_is_success(self, make_config):
        main_cli(["-c", "host", "-t", "0"], config=make_config())

    def test_filesystem_failure_exits_2(self, make_config, write_live_file, caplog):
        config = make_config()
        write_live_file("host", b"x")

        with patch.object(Path, "replace", side_effect=OSError(errno.EROFS, "Read-only file system")):
            with pytest.raises(SystemExit) as exc_info:
                main_cli(["-c", "host", "-t", "7"], config=config)

        assert exc_info.value.code == ExitStatus.FILESYSTEM_ERROR
        assert "failed steps: move_spool_b" in caplog.text

    def test_reads_sys_argv(self, make_config, write_live_file):
        config = make_config(spool_a=False)
        write_live_file("host", b"x")

        with patch("sys.argv", ["move-perfdata", "-c", "host", "-t", "9"]):
            main_cli(config=config)

        assert (config.spool_b_dir / "host_perfdata.9").exists()


class TestLogging:
    """Diagnostic line format."""

    def test_line_format(self):
        formatter = logging.Formatter(LOG_FORMAT, LOG_DATE_FORMAT)
        record = logging.LogRecord("perfrouter", logging.ERROR, __file__, 1, "Invalid: -x", None, None)

        line = formatter.format(record)

        assert re.fullmatch(r"\[\d{4}-\d{2}-\d{2}T\d{2}:\d{2}:\d{2}[+-]\d{4}\]: Invalid: -x", line)
        assert line[1:11] == time.strftime("%Y-%m-%d", time.localtime(record.created))

    def test_setup_logging_targets_stderr(self, monkeypatch):
        monkeypatch.delenv("PERFROUTER_DEBUG", raising=False)

        with patch("perfrouter.cli.main.logging.basicConfig") as mock_basic_config:
            setup_logging()

        kwargs = mock_basic_config.call_args.kwargs
        assert kwargs["level"] == logging.INFO
        assert kwargs["format"] == LOG_FORMAT
        assert kwargs["datefmt"] == LOG_DATE_FORMAT
        assert kwargs["stream"] is sys.stderr

    def test_setup_logging_debug_env(self, monkeypatch):
        monkeypatch.setenv("PERFROUTER_DEBUG", "1")

        with patch("perfrouter.cli.main.logging.basicConfig") as mock_basic_config:
            setup_logging()

        assert mock_basic_config.call_args.kwargs["level"] == logging.DEBUG

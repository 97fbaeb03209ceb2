"""Tests for command line argument parser."""

import logging
from argparse import Namespace
from pathlib import Path
from unittest.mock import MagicMock

import pytest
from pytest_mock import MockerFixture

from x500dn.platform.logging import DEFAULT_LOG_FILE
from x500dn.ui.cli.args import ArgumentParser, GetArgs, NameArgs

NAME = "CN=Ethel the Aardvark, OU=Australia"


def test_create_parser() -> None:
    """Argument parser should expose expected subcommands and options."""

    parser = ArgumentParser.create_parser()

    parse_args: Namespace = parser.parse_args(["parse", NAME])
    assert parse_args.command == "parse"
    assert parse_args.name == NAME
    assert parse_args.separator is None

    get_args: Namespace = parser.parse_args(["get", NAME, "OU", "--verbose"])
    assert get_args.command == "get"
    assert get_args.key == "OU"
    assert get_args.verbose

    format_args = parser.parse_args(["format", NAME, "--separator", ", ", "--quiet"])
    assert format_args.separator == ", "
    assert format_args.quiet


def test_separator_only_on_rendering_commands() -> None:
    parser = ArgumentParser.create_parser()

    with pytest.raises(SystemExit):
        _ = parser.parse_args(["cn", NAME, "--separator", ","])


def test_command_is_required() -> None:
    with pytest.raises(SystemExit):
        _ = ArgumentParser.create_parser().parse_args([])


def test_process_args_name(mocker: MockerFixture) -> None:
    """Process name arguments and coerce separator and logging levels."""

    mock_config = mocker.patch("x500dn.ui.cli.args.parser.Config")
    mock_setup_logger = mocker.patch("x500dn.ui.cli.args.parser.setup_logger")
    mock_config.load.return_value.log_file = None
    mock_config.load.return_value.separator = " | "

    args = ArgumentParser.process_args(["format", NAME])
    assert isinstance(args, NameArgs)
    assert args.command == "format"
    assert args.name == NAME
    assert args.separator == " | "
    assert mock_setup_logger.call_args.kwargs["console_level"] == logging.INFO
    assert mock_setup_logger.call_args.kwargs["log_file"] == DEFAULT_LOG_FILE
    mock_config.load.assert_called_once()

    mock_setup_logger.reset_mock()
    args = ArgumentParser.process_args(["parse", NAME, "--separator", ",", "--verbose"])
    assert isinstance(args, NameArgs)
    assert args.separator == ","
    assert args.verbose
    assert mock_setup_logger.call_args.kwargs["console_level"] == logging.DEBUG


def test_process_args_get(mocker: MockerFixture) -> None:
    mock_config = mocker.patch("x500dn.ui.cli.args.parser.Config")
    mock_setup_logger = mocker.patch("x500dn.ui.cli.args.parser.setup_logger")
    custom_log_path = Path("/tmp/custom.log")
    mock_config.load.return_value.log_file = custom_log_path

    args = ArgumentParser.process_args(["get", NAME, " OU ", "--quiet"])

    assert isinstance(args, GetArgs)
    assert args.key == "OU"
    assert args.quiet
    assert mock_setup_logger.call_args.kwargs["console_level"] == logging.ERROR
    assert mock_setup_logger.call_args.kwargs["log_file"] == custom_log_path


def test_process_args_get_blank_key_selects_anonymous(mocker: MockerFixture) -> None:
    mock_config = mocker.patch("x500dn.ui.cli.args.parser.Config")
    _ = mocker.patch("x500dn.ui.cli.args.parser.setup_logger")
    mock_config.load.return_value.log_file = None

    args = ArgumentParser.process_args(["get", "Ethel,OU=A", ""])

    assert isinstance(args, GetArgs)
    assert args.key == ""


def test_console_logging_is_ready_before_config_loads(mocker: MockerFixture) -> None:
    """Configuration errors must reach a console handler."""

    calls: list[str] = []

    def _load() -> MagicMock:
        calls.append("load")
        return MagicMock(log_file=None, separator=None)

    def _setup_logger(**kwargs: object) -> None:
        calls.append("file" if kwargs.get("log_file") else "console")

    mock_config = mocker.patch("x500dn.ui.cli.args.parser.Config")
    mock_config.load.side_effect = _load
    _ = mocker.patch("x500dn.ui.cli.args.parser.setup_logger", side_effect=_setup_logger)

    _ = ArgumentParser.process_args(["cn", NAME])

    assert calls == ["console", "load", "file"]

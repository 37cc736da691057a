"""Tests for the command line entry point."""

import argparse
import configparser
import io
import sys
from pathlib import Path

import pytest

from steam_idler import cli, config


class Terminal(io.StringIO):
    def isatty(self) -> bool:
        return True


@pytest.fixture
def run_main(monkeypatch: pytest.MonkeyPatch):
    monkeypatch.setattr(config, 'init', lambda: None)
    monkeypatch.setattr(config, 'init_logger', lambda: None)

    def run(*args: str) -> int:
        monkeypatch.setattr(sys, 'argv', ['steam-idler', *args])

        with pytest.raises(SystemExit) as exception_info:
            cli.main()

        return exception_info.value.code

    return run


class TestAppIdType:
    @pytest.mark.parametrize("value, expected", [("440", 440), ("0", 0), ("4294967295", 4294967295)])
    def test_valid(self, value: str, expected: int) -> None:
        assert cli.app_id_type(value) == expected

    @pytest.mark.parametrize("value", ["", "abc", "-1", "4294967296", "4.4", "+4", " 440"])
    def test_invalid(self, value: str) -> None:
        with pytest.raises(argparse.ArgumentTypeError):
            cli.app_id_type(value)


class TestDurationType:
    def test_valid(self) -> None:
        assert cli.duration_type("1h30m") == 5400

    def test_invalid(self) -> None:
        with pytest.raises(argparse.ArgumentTypeError, match="Invalid duration: missing value before 'm'"):
            cli.duration_type("365dm")


class TestUseProgress:
    def test_auto(self) -> None:
        assert cli.use_progress('auto', False, Terminal())
        assert not cli.use_progress('auto', False, io.StringIO())

    def test_always_and_never(self) -> None:
        assert cli.use_progress('always', False, io.StringIO())
        assert not cli.use_progress('never', False, Terminal())

    def test_no_progress_flag(self) -> None:
        assert not cli.use_progress('always', True, Terminal())


class TestMain:
    def test_invalid_duration(self, run_main, capsys: pytest.CaptureFixture) -> None:
        assert run_main("440", "1x") == 2
        assert "Invalid duration: unexpected character 'x'" in capsys.readouterr().err

    def test_invalid_app_id(self, run_main, capsys: pytest.CaptureFixture) -> None:
        assert run_main("tf2", "1h") == 2
        assert "tf2 is not a valid app id" in capsys.readouterr().err

    def test_missing_arguments(self, run_main, capsys: pytest.CaptureFixture) -> None:
        assert run_main("440") == 2
        assert "<appid>, <duration>" in capsys.readouterr().err

    def test_version(self, run_main, capsys: pytest.CaptureFixture) -> None:
        assert run_main("--version") == 0
        assert capsys.readouterr().out.strip() == cli.__version__

    def test_config_dir(self, run_main, capsys: pytest.CaptureFixture, tmp_path: Path) -> None:
        assert run_main("--config-dir") == 0
        assert capsys.readouterr().out.strip() == str(tmp_path)

    def test_broken_config(self, monkeypatch: pytest.MonkeyPatch) -> None:
        def broken_init() -> None:
            raise configparser.Error("Please, fix your config file.")

        monkeypatch.setattr(config, 'init', broken_init)
        monkeypatch.setattr(sys, 'argv', ['steam-idler', '440', '1h'])

        with pytest.raises(SystemExit) as exception_info:
            cli.main()

        assert exception_info.value.code == 1

    def test_log_dir(self, run_main, capsys: pytest.CaptureFixture, tmp_path: Path) -> None:
        assert run_main("--log-dir") == 0
        assert capsys.readouterr().out.strip() == str(tmp_path)

    def test_reset(self, run_main, monkeypatch: pytest.MonkeyPatch) -> None:
        calls = []
        monkeypatch.setattr(config, 'reset', lambda: calls.append(True))

        assert run_main("--reset") == 0
        assert calls == [True]

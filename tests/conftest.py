"""Shared pytest fixtures."""

import configparser
from pathlib import Path

import pytest

from steam_idler import config


@pytest.fixture(autouse=True)
def config_parser(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> configparser.RawConfigParser:
    """Give each test a fresh parser and keep config files inside tmp_path."""
    parser = configparser.RawConfigParser()
    parser.read_dict(config.default_config)
    parser.set('logger', 'log_directory', str(tmp_path))
    parser.set('idle', 'lookup_name', 'False')

    monkeypatch.setattr(config, 'parser', parser)
    monkeypatch.setattr(config, 'config_file_directory', tmp_path)
    monkeypatch.setattr(config, 'config_file', tmp_path / 'steam-idler.config')
    return parser

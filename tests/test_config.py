"""Tests for config handling."""

import configparser
import logging
from pathlib import Path

import pytest

from steam_idler import config, logger_handlers


class TestValidateConfig:
    def test_valid_value(self, config_parser: configparser.RawConfigParser) -> None:
        config_parser.set('idle', 'progress', 'never')
        config.validate_config('idle', 'progress', config.progress_modes)

    def test_invalid_value(self, config_parser: configparser.RawConfigParser) -> None:
        config_parser.set('idle', 'progress', 'sometimes')

        with pytest.raises(configparser.Error, match="auto, always, never"):
            config.validate_config('idle', 'progress', config.progress_modes)

    def test_unsupported_language(self, config_parser: configparser.RawConfigParser) -> None:
        config_parser.set('general', 'language', 'xx')
        config.validate_config('general', 'language', config.translations)

        assert config_parser.get('general', 'language') == 'en'


class TestNew:
    def test_saves_changes(self, tmp_path: Path) -> None:
        config.new('idle', 'progress', 'always')

        saved = configparser.RawConfigParser()
        saved.read(tmp_path / 'steam-idler.config')
        assert saved.get('idle', 'progress') == 'always'

    def test_skips_unchanged(self, tmp_path: Path) -> None:
        config.new('idle', 'progress', 'auto')

        assert not (tmp_path / 'steam-idler.config').exists()


class TestInit:
    def test_reads_config_file(self, tmp_path: Path, config_parser: configparser.RawConfigParser) -> None:
        (tmp_path / 'steam-idler.config').write_text("[idle]\nprogress = never\n", encoding='utf8')
        config.init()

        assert config_parser.get('idle', 'progress') == 'never'

    def test_rejects_bad_progress(self, tmp_path: Path) -> None:
        (tmp_path / 'steam-idler.config').write_text("[idle]\nprogress = sometimes\n", encoding='utf8')

        with pytest.raises(configparser.Error):
            config.init()

    def test_rejects_bad_lookup_name(self, tmp_path: Path) -> None:
        (tmp_path / 'steam-idler.config').write_text("[idle]\nlookup_name = maybe\n", encoding='utf8')

        with pytest.raises(configparser.Error):
            config.init()

    def test_missing_log_directory(self, tmp_path: Path, config_parser: configparser.RawConfigParser) -> None:
        config_parser.set('logger', 'log_directory', str(tmp_path / 'missing'))
        config.init()

        assert config_parser.get('logger', 'log_directory') == str(tmp_path)


class TestReset:
    def test_removes_config_and_logs(self, tmp_path: Path) -> None:
        (tmp_path / 'steam-idler.config').write_text("[idle]\nprogress = never\n", encoding='utf8')
        (tmp_path / 'steam-idler.log.1').write_text("old", encoding='utf8')
        file_handler = logger_handlers.RotatingFileHandler(tmp_path / 'steam-idler.log', encoding='utf-8')
        logging.root.addHandler(file_handler)

        config.reset()
        detached = file_handler not in logging.root.handlers
        logging.root.removeHandler(file_handler)
        file_handler.close()

        assert detached
        assert list(tmp_path.iterdir()) == []

    def test_missing_files(self, tmp_path: Path) -> None:
        config.reset()

        assert list(tmp_path.iterdir()) == []

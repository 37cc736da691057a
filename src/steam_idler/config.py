#!/usr/bin/env python
#
# Lara Maia <dev@lara.monster> 2024
#
# The Steam Idler is free software: you can redistribute it and/or
# modify it under the terms of the GNU General Public License as
# published by the Free Software Foundation, either version 3 of
# the License, or (at your option) any later version.
#
# The Steam Idler is distributed in the hope that it will be useful,
# but WITHOUT ANY WARRANTY; without even the implied warranty of
# MERCHANTABILITY or FITNESS FOR A PARTICULAR PURPOSE.
# See the GNU General Public License for more details.
#
# You should have received a copy of the GNU General Public License
# along with this program. If not, see http://www.gnu.org/licenses/.
#
import configparser
import logging
import os
import sys
from collections import OrderedDict
from pathlib import Path
from typing import Any, Dict

from . import i18n, logger_handlers

log = logging.getLogger(__name__)
script_dir = Path(__file__).resolve().parent

if (script_dir / 'portable_mode.txt').is_file():
    data_dir = script_dir / 'config'
elif sys.platform == 'win32':
    data_dir = Path(os.environ['LOCALAPPDATA'])
else:
    data_dir = Path(os.getenv('XDG_CONFIG_HOME', Path.home() / '.config'))

config_file_directory = data_dir / 'steam-idler'
config_file = config_file_directory / 'steam-idler.config'


# translation module isn't initialized yet
def _(message: str) -> str:
    return message


log_levels = OrderedDict([
    ('critical', _("Critical")),
    ('error', _("Error")),
    ('warning', _("Warning")),
    ('info', _("Info")),
    ('debug', _("Debug")),
])

translations = OrderedDict([
    ('en', _("English")),
])

progress_modes = OrderedDict([
    ('auto', _("Only when running on a terminal")),
    ('always', _("Always")),
    ('never', _("Never")),
])

_ = i18n.get_translation

default_config: Dict[str, Dict[str, Any]] = {
    'logger': {
        'log_directory': config_file_directory,
        'log_level': 'debug',
        'log_console_level': 'info',
    },
    'general': {
        'language': 'en',
    },
    'idle': {
        'progress': 'auto',
        'lookup_name': True,
        'store_url': 'https://store.steampowered.com',
    },
}

parser = configparser.RawConfigParser()
parser.read_dict(default_config)


def validate_config(section: str, option: str, defaults: OrderedDict[str, str]) -> None:
    value = parser.get(section, option)

    if value and value not in defaults.keys():
        if option == 'language':
            log.error(_("Unsupported language requested. Fallbacking to English."))
            new('general', 'language', 'en')
            return

        raise configparser.Error(_("Please, fix your config file. Available values for {}:\n{}").format(
            option,
            ', '.join(defaults.keys()),
        ))


def init() -> None:
    config_file_directory.mkdir(parents=True, exist_ok=True)

    if config_file.is_file():
        parser.read(config_file)

    log_directory = Path(parser.get("logger", "log_directory"))

    if not log_directory.is_dir():
        log.error(_("Incorrect log directory. Fallbacking to default."))
        log_directory = config_file_directory
        new("logger", "log_directory", log_directory)

    validate_config("logger", "log_level", log_levels)
    validate_config("logger", "log_console_level", log_levels)
    validate_config("general", "language", translations)
    validate_config("idle", "progress", progress_modes)

    try:
        parser.getboolean("idle", "lookup_name")
    except ValueError:
        raise configparser.Error(_("Please, fix your config file. lookup_name must be True or False")) from None


def init_logger() -> None:
    log_directory = Path(parser.get("logger", "log_directory"))
    log_level = parser.get("logger", "log_level")
    log_console_level = parser.get("logger", "log_console_level")

    log_file_handler = logger_handlers.RotatingFileHandler(log_directory / 'steam-idler.log',
                                                           backupCount=1,
                                                           encoding='utf-8')
    log_file_handler.setFormatter(logging.Formatter('%(name)s:%(levelname)s (%(funcName)s) => %(message)s'))
    log_file_handler.setLevel(getattr(logging, log_level.upper()))

    try:
        log_file_handler.doRollover()
    except PermissionError:
        log.debug(_("Unable to open steam-idler.log"))
        log_file_handler.close()
        log_file_handler = logger_handlers.NullHandler()  # type: ignore

    log_console_handler = logger_handlers.ColoredStreamHandler()
    log_console_handler.setLevel(getattr(logging, log_console_level.upper()))

    log_stlib = logging.getLogger('stlib')
    log_stlib.setLevel(logging.DEBUG)
    log_stlib.propagate = False
    log_stlib.addHandler(log_console_handler)
    log_stlib.addHandler(log_file_handler)

    # noinspection PyArgumentList
    logging.basicConfig(level=logging.DEBUG, handlers=[log_file_handler, log_console_handler])


def new(section: str, option: str, value: Any) -> None:
    if parser.get(section, option, fallback='') != str(value):
        log.debug(_('Saving {}:{} on config file').format(section, option))
        parser.set(section, option, str(value))

        with open(config_file, 'w', encoding="utf8") as config_file_object:
            parser.write(config_file_object)
    else:
        log.debug(_('Not saving {}:{} because values are already updated').format(section, option))


def reset() -> None:
    config_file.unlink(missing_ok=True)

    log_directory = Path(parser.get("logger", "log_directory"))

    # release the log file before removing it
    for handler in logging.root.handlers[:]:
        if isinstance(handler, logger_handlers.RotatingFileHandler):
            logging.root.removeHandler(handler)
            handler.close()

    (log_directory / 'steam-idler.log').unlink(missing_ok=True)
    (log_directory / 'steam-idler.log.1').unlink(missing_ok=True)

    log.warning(_('Config cleaned!'))

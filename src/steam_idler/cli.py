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

import argparse
import asyncio
import configparser
import contextlib
import logging
import sys
import textwrap
from typing import TextIO

from steam_idler import config, i18n, __version__
from steam_idler.console import cli
from steam_idler.core import duration

_ = i18n.get_translation
log = logging.getLogger(__name__)

MAX_APP_ID = 2 ** 32 - 1


def app_id_type(value: str) -> int:
    if not (value.isascii() and value.isdigit()) or int(value) > MAX_APP_ID:
        raise argparse.ArgumentTypeError(_("{} is not a valid app id").format(value))

    return int(value)


def duration_type(value: str) -> int:
    try:
        return duration.parse_duration(value)
    except duration.ParseDurationError as exception:
        raise argparse.ArgumentTypeError(_("Invalid duration: {}").format(exception)) from None


def use_progress(progress_mode: str, no_progress: bool, stream: TextIO) -> bool:
    if no_progress or progress_mode == 'never':
        return False

    if progress_mode == 'always':
        return True

    return stream.isatty()


def main() -> None:
    try:
        config.init()
    except configparser.Error as exception:
        log.critical(str(exception))
        sys.exit(1)

    command_parser = argparse.ArgumentParser(
        prog='steam-idler',
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=textwrap.dedent('''
                Duration format: <value><unit>[<value><unit>...]
                 d | days
                 h | hours
                 m | minutes
                 s | seconds
                Example: steam-idler 440 1d2h30m
                       '''))

    command_parser.add_argument(
        'app_id',
        metavar='<appid>',
        type=app_id_type,
        nargs='?',
        help='Steam app id to idle',
    )

    command_parser.add_argument(
        'duration',
        metavar='<duration>',
        type=duration_type,
        nargs='?',
        help='How long to idle (e.g. 1h20m)',
    )

    command_parser.add_argument(
        '--no-progress',
        action='store_true',
        help="Don't show the live countdown",
        dest='no_progress',
    )

    command_parser.add_argument(
        '--config-dir',
        action='store_true',
        help='Shows directory used to save config files',
        dest='config_dir'
    )

    command_parser.add_argument(
        '--log-dir',
        action='store_true',
        help='Shows directory used to save log files',
        dest='log_dir',
    )

    command_parser.add_argument(
        '--reset',
        action='store_true',
        help='Clean up settings and log files',
        dest='reset',
    )

    command_parser.add_argument(
        '-v', '--version',
        action='store_true',
        help='Show version',
        dest='version',
    )

    console_params = command_parser.parse_args()

    if console_params.version:
        print(__version__)
        sys.exit(0)

    if console_params.config_dir:
        print(config.config_file_directory)
        sys.exit(0)

    if console_params.log_dir:
        print(config.parser.get("logger", "log_directory"))
        sys.exit(0)

    config.init_logger()

    if console_params.reset:
        config.reset()
        sys.exit(0)

    if console_params.app_id is None or console_params.duration is None:
        command_parser.error(_("the following arguments are required: <appid>, <duration>"))

    print(f'Steam Idler version {__version__}')
    print('Copyright (C) 2024 Lara Maia - <dev@lara.monster>')

    interactive = use_progress(
        config.parser.get("idle", "progress"),
        console_params.no_progress,
        sys.stderr,
    )

    app = cli.SteamIdler(console_params.app_id, console_params.duration, interactive)

    with contextlib.suppress(asyncio.CancelledError, KeyboardInterrupt):
        asyncio.run(app.init())

    # prevent tries to open log file at shutdown
    logging.root.removeHandler(logging.root.handlers[0])

    sys.exit(app.exit_code)


if __name__ == "__main__":
    main()

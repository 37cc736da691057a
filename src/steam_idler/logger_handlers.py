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

import sys
# noinspection PyUnresolvedReferences
from logging import Handler, NullHandler, LogRecord
# noinspection PyUnresolvedReferences
from logging.handlers import RotatingFileHandler
from typing import TextIO


class ColoredStreamHandler(Handler):
    color_map = {
        'INFO': 37,
        'WARNING': 33,
        'ERROR': 35,
        'CRITICAL': 31,
        'DEBUG': 36,
    }

    def __init__(self, stream: TextIO | None = None) -> None:
        super().__init__()
        self.stream = stream

    @property
    def use_colors(self) -> bool:
        stream = self.stream or sys.stderr
        return sys.platform != 'win32' and stream.isatty()

    def emit(self, record: LogRecord) -> None:
        # noinspection PyBroadException
        try:
            stream = self.stream or sys.stderr
            first_line, *extra_lines = record.getMessage().split('\n')

            if self.use_colors:
                color_number = self.color_map.get(record.levelname, 37)
                stream.write(f'\033[32m --> \033[{color_number}m{first_line}\033[m\n')

                for line in extra_lines:
                    stream.write(f'\033[1;37m{line}\033[m\n')
            else:
                stream.write(f' --> {first_line}\n')

                for line in extra_lines:
                    stream.write(f'{line}\n')

            stream.flush()
        except Exception:
            self.handleError(record)

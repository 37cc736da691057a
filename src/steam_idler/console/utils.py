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
import asyncio
import inspect
import logging
import sys
from typing import Any, TextIO

from .. import i18n, core

log = logging.getLogger(__name__)
_ = i18n.get_translation


def set_console(module_data: core.utils.ModuleData, stream: TextIO | None = None) -> None:
    stream = stream or sys.stderr

    if module_data.error:
        if module_data.suppress_logging:
            print(module_data.error, file=stream)
        else:
            log.error(module_data.error)

        return

    if module_data.action == "progress":
        # rewrite the same line
        stream.write(f'\r{module_data.info} ')
        stream.flush()
        return

    if module_data.status and not module_data.suppress_logging:
        log.info(module_data.status)

    if module_data.info:
        if not module_data.suppress_logging:
            log.debug(f"info data: {module_data.info}")

        print(module_data.info, file=stream, flush=True)


def end_progress(stream: TextIO | None = None) -> None:
    stream = stream or sys.stderr
    print(file=stream, flush=True)


def safe_task_callback(task: asyncio.Task[Any]) -> None:
    if task.cancelled():
        coro = task.get_coro()
        assert inspect.iscoroutine(coro), "isn't coro?"
        log.debug(_("\n%s has been stopped due user request"), coro.__name__)
        return

    exception = task.exception()

    if exception and not isinstance(exception, KeyboardInterrupt):
        for frame in task.get_stack():
            log.critical("%s at %s", type(exception).__name__, frame)

        log.critical("Fatal Error: %s", str(exception))

        core.safe_exit()

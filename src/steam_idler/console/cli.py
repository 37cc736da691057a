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
import contextlib
import logging
import sys
from typing import TextIO

from . import utils
from .. import i18n, core

log = logging.getLogger(__name__)
_ = i18n.get_translation


class SteamIdler:
    def __init__(
            self,
            app_id: int,
            total_seconds: int,
            interactive: bool,
            stream: TextIO | None = None,
    ) -> None:
        self.app_id = app_id
        self.total_seconds = total_seconds
        self.interactive = interactive
        self.stream = stream or sys.stderr
        self.exit_code = 0

    async def init(self) -> None:
        task = asyncio.create_task(self.run_idle())
        task.add_done_callback(utils.safe_task_callback)

        with contextlib.suppress(asyncio.CancelledError):
            await task

        # safe_task_callback already reported it
        if task.done() and not task.cancelled() and task.exception():
            self.exit_code = 1

    async def run_idle(self) -> None:
        log.debug(_("Idling %s for %s seconds"), self.app_id, self.total_seconds)
        idle = core.idle.main(self.app_id, self.total_seconds, self.interactive)
        on_progress_line = False

        async for module_data in idle:
            if on_progress_line and module_data.action != "progress":
                utils.end_progress(self.stream)

            on_progress_line = module_data.action == "progress"

            if module_data.error:
                self.exit_code = 1

            utils.set_console(module_data, self.stream)

        if on_progress_line:
            utils.end_progress(self.stream)

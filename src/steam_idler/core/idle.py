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
import logging
from typing import AsyncGenerator

import aiohttp

from . import store, utils
from .duration import ONE_DAY_SECONDS
from .human import format_duration
from .. import i18n, config

try:
    from stlib import client
except ImportError as exception:
    logging.getLogger(__name__).error(str(exception))
    client = None

log = logging.getLogger(__name__)
_ = i18n.get_translation

SPINNER = ('|', '/', '-', '\\')


def progress_message(app_id: int, total_seconds: int, current: int) -> str:
    spinner_char = SPINNER[current % len(SPINNER)]

    if total_seconds:
        percent = current / total_seconds * 100
    else:
        percent = 100.0

    return _("Idling {} for {}: {}, {:.1f}% {}").format(
        app_id,
        format_duration(total_seconds),
        format_duration(current),
        percent,
        spinner_char,
    )


def static_message(app_id: int, total_seconds: int) -> str:
    return _("Idling {} for {}s").format(app_id, total_seconds)


async def wait(total_seconds: int) -> None:
    # event loop timers can't handle arbitrarily large delays
    remaining = total_seconds

    while remaining > 0:
        chunk = min(remaining, ONE_DAY_SECONDS)
        await asyncio.sleep(chunk)
        remaining -= chunk


async def get_app_name(app_id: int) -> str:
    if not config.parser.getboolean('idle', 'lookup_name'):
        return str(app_id)

    store_url = config.parser.get('idle', 'store_url')

    try:
        return await store.get_app_name(app_id, store_url)
    except (aiohttp.ClientError, asyncio.TimeoutError) as exception:
        log.warning(_("Unable to reach Steam Store: %s"), exception)
    except ValueError as exception:
        log.warning(str(exception))

    return str(app_id)


async def main(
        app_id: int,
        total_seconds: int,
        interactive: bool = True,
) -> AsyncGenerator[utils.ModuleData, None]:
    if not client:
        yield utils.ModuleData(error=_(
            "Idling has been disabled because you have "
            "a stlib built without SteamWorks support. To enable it again, "
            "reinstall stlib with SteamWorks support"
        ))
        return

    app_name = await get_app_name(app_id)

    yield utils.ModuleData(
        display=str(app_id),
        status=_("Loading {}").format(app_name),
    )

    try:
        with client.SteamAPIExecutor(app_id) as executor:
            if interactive:
                for current in range(total_seconds + 1):
                    yield utils.ModuleData(
                        display=str(app_id),
                        info=progress_message(app_id, total_seconds, current),
                        level=(current, total_seconds),
                        action="progress",
                        raw_data=executor,
                        suppress_logging=True,
                    )

                    if current < total_seconds:
                        await asyncio.sleep(1)
            else:
                yield utils.ModuleData(
                    display=str(app_id),
                    info=static_message(app_id, total_seconds),
                    raw_data=executor,
                )

                await wait(total_seconds)
    except ProcessLookupError:
        yield utils.ModuleData(error=_("Steam Client is not running."))
        return

    yield utils.ModuleData(
        display=str(app_id),
        status=_("Done"),
        info=_("{} has been idle for {}").format(app_name, format_duration(total_seconds)),
        action="done",
    )

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
import logging
from typing import Any, Dict

import aiohttp

from .. import i18n

log = logging.getLogger(__name__)
_ = i18n.get_translation


def app_name_from_details(details: Dict[str, Any], app_id: int) -> str:
    try:
        app_details = details[str(app_id)]
        success = app_details.get('success')
    except (KeyError, TypeError, AttributeError):
        raise ValueError(_("Unexpected response from Steam Store")) from None

    if not success:
        raise ValueError(_("App {} doesn't exist").format(app_id))

    try:
        return str(app_details['data']['name'])
    except (KeyError, TypeError):
        raise ValueError(_("Unexpected response from Steam Store")) from None


async def get_app_name(app_id: int, store_url: str, timeout: int = 10) -> str:
    params = {'appids': app_id, 'filters': 'basic'}
    client_timeout = aiohttp.ClientTimeout(total=timeout)

    async with aiohttp.ClientSession(raise_for_status=True, timeout=client_timeout) as http_session:
        async with http_session.get(f'{store_url}/api/appdetails', params=params) as response:
            details = await response.json(content_type=None)

    log.debug(_("Store details for %s: %s"), app_id, details)
    return app_name_from_details(details, app_id)

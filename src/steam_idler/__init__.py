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

from importlib.metadata import version, PackageNotFoundError

try:
    __version__ = version('steam-idler')
except PackageNotFoundError:  # running from source tree
    __version__ = '0.0.0'

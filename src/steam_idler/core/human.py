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
from dataclasses import dataclass

from .duration import ONE_DAY_SECONDS, ONE_HOUR_SECONDS, ONE_MINUTE_SECONDS


@dataclass(frozen=True)
class HumanDuration:
    days: int = 0
    hours: int = 0
    minutes: int = 0
    seconds: int = 0

    @classmethod
    def from_seconds(cls, total_seconds: int) -> 'HumanDuration':
        days, remaining_seconds = divmod(total_seconds, ONE_DAY_SECONDS)
        hours, remaining_seconds = divmod(remaining_seconds, ONE_HOUR_SECONDS)
        minutes, seconds = divmod(remaining_seconds, ONE_MINUTE_SECONDS)
        return cls(days, hours, minutes, seconds)

    def to_seconds(self) -> int:
        return (
                self.days * ONE_DAY_SECONDS
                + self.hours * ONE_HOUR_SECONDS
                + self.minutes * ONE_MINUTE_SECONDS
                + self.seconds
        )

    def __str__(self) -> str:
        fields = (
            (self.days, 'd'),
            (self.hours, 'h'),
            (self.minutes, 'm'),
            (self.seconds, 's'),
        )

        text = ''.join(f'{value}{unit}' for value, unit in fields if value)
        return text or '0s'


def format_duration(total_seconds: int) -> str:
    return str(HumanDuration.from_seconds(total_seconds))

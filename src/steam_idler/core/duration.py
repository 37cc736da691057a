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
import enum
from typing import Dict

MAX_SECONDS = 2 ** 64 - 1

ONE_DAY_SECONDS = 60 * 60 * 24
ONE_HOUR_SECONDS = 60 * 60
ONE_MINUTE_SECONDS = 60

UNIT_SCALES: Dict[str, int] = {
    'd': ONE_DAY_SECONDS,
    'h': ONE_HOUR_SECONDS,
    'm': ONE_MINUTE_SECONDS,
    's': 1,
}

DIGITS = frozenset('0123456789')


class ParseErrorKind(enum.Enum):
    UNEXPECTED = 'unexpected character {!r}'
    VALUELESS = 'missing value before {!r}'


class ParseDurationError(ValueError):
    """Raised when a duration string doesn't follow the <digits><unit> grammar

    There are only two cases, told apart by `kind`:
      UNEXPECTED: `char` is neither an ASCII digit nor a unit suffix
      VALUELESS: the unit suffix `char` has no digits before it
    """

    def __init__(self, kind: ParseErrorKind, char: str) -> None:
        self.kind = kind
        self.char = char
        super().__init__(kind.value.format(char))

    @classmethod
    def unexpected(cls, char: str) -> 'ParseDurationError':
        return cls(ParseErrorKind.UNEXPECTED, char)

    @classmethod
    def valueless(cls, char: str) -> 'ParseDurationError':
        return cls(ParseErrorKind.VALUELESS, char)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ParseDurationError):
            return NotImplemented

        return (self.kind, self.char) == (other.kind, other.char)

    def __hash__(self) -> int:
        return hash((self.kind, self.char))

    def __repr__(self) -> str:
        return f'{type(self).__name__}({self.kind.name}, {self.char!r})'


def saturating_add(first: int, second: int) -> int:
    return min(first + second, MAX_SECONDS)


def saturating_mul(first: int, second: int) -> int:
    return min(first * second, MAX_SECONDS)


def _parse_value(digits: str) -> int:
    digits = digits.lstrip('0') or '0'

    # int() refuses very long strings, and anything this long overflows anyway
    if len(digits) > len(str(MAX_SECONDS)):
        return MAX_SECONDS

    return min(int(digits), MAX_SECONDS)


def parse_duration(text: str) -> int:
    """Convert a compact duration like '1h20m4d' to seconds

    Units can be given in any order and repeated. Digits without a unit
    at the end of the text are ignored, so an empty string is 0 seconds.
    Values too big to be represented are clamped to MAX_SECONDS.
    """
    total = 0
    slice_start = 0

    for index, char in enumerate(text):
        if char in DIGITS:
            continue

        if char not in UNIT_SCALES:
            raise ParseDurationError.unexpected(char)

        if slice_start == index:
            raise ParseDurationError.valueless(char)

        value = _parse_value(text[slice_start:index])
        total = saturating_add(total, saturating_mul(value, UNIT_SCALES[char]))
        slice_start = index + 1

    return total

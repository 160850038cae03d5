# -*- encoding: utf-8 -*-
# @File   : casters.py
# @Time   : 2024/10/13 11:26:40
# @Author : Kariko Lin

"""String to bool / int / float, for `ConfigParser.getxxx()`.

An empty string is what a bare key (`flag` without `=`) reads as,
so it counts as `True`, `1` or `1.0`.
Only plain ASCII literals are taken: no spaces, no `1_000`, no `1,5`.
Integers are Python `int`s, so there is no upper bound on them.
"""

from re import ASCII, IGNORECASE
from re import compile as regex

from ..errors import InvalidLiteral

_TRUTHY = frozenset({'true', 'yes', 'on', '1', ''})
_FALSY = frozenset({'false', 'no', 'off', '0'})

_UINT = regex(r'\+?[0-9]+', ASCII)
_INT = regex(r'[+-]?[0-9]+', ASCII)
_FLOAT = regex(
    r'[+-]?(?:(?:[0-9]+\.?[0-9]*|\.[0-9]+)(?:e[+-]?[0-9]+)?|inf|infinity|nan)',
    ASCII | IGNORECASE)


def _lower(text: str) -> str:
    # str.lower() would also fold non-ASCII letters.
    return ''.join(c.lower() if c.isascii() else c for c in text)


def cast_bool(text: str) -> bool:
    lower = _lower(text)
    if lower in _TRUTHY:
        return True
    if lower in _FALSY:
        return False
    raise InvalidLiteral(f'{text!r} is not a boolean')


def cast_uint(text: str) -> int:
    if text == '':
        return 1
    if _UINT.fullmatch(text) is None:
        raise InvalidLiteral(f'{text!r} is not an unsigned integer')
    return int(text)


def cast_int(text: str) -> int:
    if text == '':
        return 1
    if _INT.fullmatch(text) is None:
        raise InvalidLiteral(f'{text!r} is not an integer')
    return int(text)


def cast_float(text: str) -> float:
    if text == '':
        return 1.0
    if _FLOAT.fullmatch(text) is None:
        raise InvalidLiteral(f'{text!r} is not a float')
    return float(text)

# -*- encoding: utf-8 -*-
# @File   : grammar.py
# @Time   : 2024/10/12 23:04:12
# @Author : Kariko Lin

from enum import Enum
from re import Match
from re import compile as regex


class LineKind(int, Enum):
    NONE = 0
    SECTION = 1
    OPTION = 2


class IniGrammar:
    """What a logical line may look like:

        ```ini
        [ section ]  ; comment after the header is fine
        key : value
        key = value
        flag         ; a "bare key", which means `flag = ` (empty string).
        ```

    Names are `\\w+` only. Values are kept as written, `;` included.
    """

    def __init__(self) -> None:
        self.s_re = regex(r'^\[\s*(\w+)\s*\](\s*[#;].*)?$')
        self.o_re = regex(r'^(\w+)(\s*[:=]\s*(.*))?$')
        self.i_re = regex(r'(%\(\s*(\w+)\s*\)s)')

    def section_name(self, line: str) -> str | None:
        if (m := self.s_re.match(line.strip())) is None:
            return None
        return m[1]

    def option_kv(self, line: str) -> tuple[str, str] | None:
        if (m := self.o_re.match(line.strip())) is None:
            return None
        return m[1], m[3] or ''

    def placeholder(self, text: str) -> Match[str] | None:
        """First `%(name)s` in `text`.

        `[1]` is the placeholder itself, `[2]` the option it refers to.
        """
        return self.i_re.search(text)

    def classify(self, line: str) -> LineKind:
        if self.section_name(line) is not None:
            return LineKind.SECTION
        if self.option_kv(line) is not None:
            return LineKind.OPTION
        return LineKind.NONE

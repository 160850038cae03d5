# -*- encoding: utf-8 -*-
# @File   : reader.py
# @Time   : 2024/10/12 22:15:31
# @Author : Kariko Lin

"""Physical lines in, logical lines out.

A line ending with `\\` gets glued to the next one, with the leading
whitespace of the continued part dropped, so that

    ```ini
    greeting : Hello, and welcome to \\
               my new application
    ```

reads as `greeting : Hello, and welcome to my new application`.
Lines starting with `#` or `;` are comments and simply vanish,
even in the middle of a continuation.
"""

import logging
from typing import Iterator, Protocol


class LineSource(Protocol):
    def readline(self) -> str: ...


class ContinuationReader:
    def __init__(self, buf: LineSource) -> None:
        self._buf = buf

    def read_continued_line(self) -> str:
        """Read the next logical line, always ending with ONE `\\n`.

        Raises `EOFError` when the source runs dry, including the case
        where it stops in the middle of a continuation (the unfinished
        line is thrown away then).
        Errors of the underlying source pass through untouched, and a
        source handing out anything but `str` (a binary file...) raises
        `TypeError`.
        """
        ret = ''
        continuing = False
        while True:
            i = self._buf.readline()
            if not i:
                raise EOFError('no more lines to read')
            if not isinstance(i, str):
                raise TypeError(
                    f'expected text lines, got {type(i).__name__}; '
                    'open the source in text mode')
            logging.debug('Read line: %s', i.rstrip())
            if i[0] in '#;':
                continue

            if not i.endswith('\n'):
                # last line of the stream, no newline after it.
                if i.endswith('\\'):
                    raise EOFError('input ends with a line continuation')
                ret += i.lstrip() if continuing else i
                break

            i = i[:-1]
            if i.endswith('\r'):
                i = i[:-1]
            if i.endswith('\\'):
                i = i[:-1]
                ret += i.lstrip() if continuing else i
                continuing = True
                continue
            ret += i.lstrip() if continuing else i
            break

        logging.debug('Returning line: %s', ret)
        return ret + '\n'

    def __iter__(self) -> Iterator[str]:
        while True:
            try:
                yield self.read_continued_line()
            except EOFError:
                return

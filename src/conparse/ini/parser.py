# -*- encoding: utf-8 -*-
# @File   : parser.py
# @Time   : 2024/10/13 00:20:37
# @Author : Kariko Lin

"""Text <-> `ConfigParser`.

Reading is repeated mutation of ONE instance, so reading several sources
into it makes later sources override earlier ones, section by section,
option by option.

Writing is always sorted (sections, then keys) and raw (no interpolation),
so equal documents give equal text whatever order they were built in:

    ```ini
    [Alpha]
    foo : wibble

    [Zulu]
    a_quuxly : barly
    foo : bar

    ```
"""

import logging
from io import StringIO, TextIOBase
from warnings import warn

import chardet

from ..abstract import FileHandler
from ..paths import PathResolver, expand_path
from .grammar import LineKind
from .model import ConfigParser
from .reader import ContinuationReader, LineSource


class IniParser(FileHandler[ConfigParser]):
    @staticmethod
    def readstream(
        buf: LineSource, ins: ConfigParser | None = None
    ) -> ConfigParser:
        """Read a decoded text stream into `ins` (or a new instance).

        A line nobody understands is skipped, and a broken stream only
        stops this very stream: whatever was read so far is kept.
        """
        if ins is None:
            ins = ConfigParser()
        grammar = ins.grammar
        this_sect: str | None = None
        try:
            for i in ContinuationReader(buf):
                match grammar.classify(i):
                    case LineKind.SECTION:
                        this_sect = grammar.section_name(i)
                        # repeated header: nothing new, just switch back.
                        if this_sect not in ins:
                            ins.add_section(this_sect)
                    case LineKind.OPTION:
                        key, val = grammar.option_kv(i)
                        if this_sect is None:
                            warn(
                                f'Option [{key}, {val}] found outside of '
                                'any section, ignored.')
                            continue
                        ins.set(this_sect, key, val)
                    case _:
                        continue
        # ValueError covers closed files and UnicodeDecodeError,
        # TypeError a binary source.
        except (OSError, ValueError, TypeError) as e:
            logging.error('Reader error on parser init: %s', e)
        return ins

    @staticmethod
    def _decode_file(filename: str, encoding: str | None = None) -> StringIO:
        with open(filename, 'rb') as fp:
            raw = fp.read()

        try:
            return StringIO(raw.decode(encoding or 'utf-8'), newline=None)
        except UnicodeDecodeError:
            logging.info('%s is not %s, guessing codec.',
                         filename, encoding or 'utf-8')

        codec = chardet.detect(raw)
        if codec['encoding'] is None or codec['confidence'] < 0.8:
            codec = {'encoding': 'utf-8'}

        # fallbacks
        try:
            buf = raw.decode(codec['encoding'])
        except (UnicodeDecodeError, LookupError):
            buf = raw.decode('latin-1')
        return StringIO(buf, newline=None)

    def read(self, ins: ConfigParser | None = None) -> ConfigParser:
        """Read the file this `IniParser` points to, into `ins`
        (or a new instance).

        CAUTION:
            May raise `OSError`.
        """
        return self.readstream(self._decode_file(self._fn, self._codec), ins)

    @staticmethod
    def readpath(
        path: str,
        ins: ConfigParser,
        encoding: str | None = None,
        path_resolver: PathResolver = expand_path
    ) -> ConfigParser:
        """Read a user supplied path (like `~/.myapprc`) into `ins`.

        Hint:
            If the file is NOT FOUND, or NOT READABLE, then it's logged
            and `ins` is left as is.
        """
        try:
            filename = path_resolver(path)
        except OSError as e:
            logging.error('Cannot expand path %s: %s', path, e)
            filename = path

        try:
            IniParser(filename, encoding).read(ins)
        except OSError as e:
            logging.error('Cannot open path %s for config: %s', path, e)
        return ins

    @staticmethod
    def writestream(instance: ConfigParser, buf: TextIOBase) -> None:
        """Write `instance` as sorted `key : value` lines.

        CAUTION:
            A value ending with `\\` is written as is, so reading the text
            back takes it for a line continuation.
        """
        for sect in sorted(instance.sections()):
            buf.write(f'[{sect}]\n')
            for key, val in sorted(instance.options(sect)):
                buf.write(f'{key} : {val}\n')
            # blank line at end of each section
            buf.write('\n')

    def write(self, instance: ConfigParser) -> None:
        """Save to the file this `IniParser` points to,
        overwriting it. Values are saved raw."""
        with open(self._fn, 'w', encoding=self._codec or 'utf-8') as fp:
            self.writestream(instance, fp)

    def __str__(self) -> str:
        return "INI file: " + super().__str__() + f" ({self._codec})"

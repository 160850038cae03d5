# -*- encoding: utf-8 -*-
# @File   : model.py
# @Time   : 2024/10/12 23:41:56
# @Author : Kariko Lin

"""
Basically INI Structure, with application supplied defaults.

Reading and writing text lives in `ini.parser`.
"""

from collections.abc import Iterable, Mapping, MutableMapping
from io import StringIO, TextIOBase
from types import MappingProxyType
from typing import Iterator

from ..errors import DuplicateSection, NoSuchOption, NoSuchSection
from ..paths import PathResolver, expand_path
from .casters import cast_bool, cast_float, cast_int, cast_uint
from .grammar import IniGrammar
from .interp import interpolate
from .reader import LineSource

Defaults = Mapping[str, str] | Iterable[tuple[str, str]]


class IniSectionProxy(MutableMapping[str, str]):
    """INI section dict.

    Keys missing in the section are looked up in the defaults,
    which are read only: writes and deletes only touch the section itself.
    Values are raw (no interpolation), see `ConfigParser.get()` for that.
    """

    def __init__(
        self, section_name: str, /,
        this_dict: dict[str, str], defaults: Mapping[str, str]
    ) -> None:
        self._name = section_name
        # shared with the owning ConfigParser, not a copy.
        self._data = this_dict
        self.__defaults = defaults

    @property
    def name(self) -> str:
        return self._name

    def __getitem__(self, key: str) -> str:
        if key in self._data:
            return self._data[key]
        elif key in self.__defaults:
            return self.__defaults[key]
        else:
            raise NoSuchOption(f'{self._name}:{key}')

    def __setitem__(self, key: str, value: str) -> None:
        self._data[key] = value

    def __delitem__(self, key: str) -> None:
        if key not in self._data:
            raise NoSuchOption(f'{self._name}:{key}')
        del self._data[key]

    def __contains__(self, key: object) -> bool:
        return key in self._data or key in self.__defaults

    def __len__(self) -> int:
        return len(self.to_dict())

    def __iter__(self) -> Iterator[str]:
        return iter(self.to_dict())

    def __str__(self) -> str:
        return f"[{self._name}]"

    def __repr__(self) -> str:
        return '[%s] { .cnt = %d }' % (self._name, len(self._data))

    def to_dict(self) -> dict[str, str]:
        """Defaults merged with the section's own pairs."""
        mrg = dict(self.__defaults)
        mrg.update(self._data)
        return mrg


class ConfigParser(MutableMapping[str, IniSectionProxy]):
    """INI document. Supports the following (comment lines aside):

        ```ini
        [section]  ; a comment may follow a header
        key : value
        key2 = My %(key)s
        flag
        long = one \\
               two
        ```

    `key2` reads as "My value" via `get()`, `flag` is a bare key (empty
    value) and `long` is continued, reading as "one two".
    Note: a `;` after an option is NOT a comment but part of the value.

    Options are fetched raw with `get_raw()` or interpolated with `get()`;
    `defaults` given at construction answer for options a section lacks.
    """

    def __init__(self, defaults: Defaults = ()) -> None:
        self.__defaults: Mapping[str, str] = MappingProxyType(dict(defaults))
        self.__sections: dict[str, dict[str, str]] = {}
        self.grammar = IniGrammar()

    # -------- construction --------

    @classmethod
    def from_readers(
        cls, bufs: Iterable[LineSource], defaults: Defaults = ()
    ) -> 'ConfigParser':
        """Read every text source in order, later ones overriding.

        Anything providing `readline()` will do: open files, `StringIO`...
        """
        from .parser import IniParser

        ret = cls(defaults)
        for i in bufs:
            IniParser.readstream(i, ret)
        return ret

    @classmethod
    def from_str(cls, text: str, defaults: Defaults = ()) -> 'ConfigParser':
        return cls.from_readers([StringIO(text)], defaults)

    @classmethod
    def from_strs(
        cls, texts: Iterable[str], defaults: Defaults = ()
    ) -> 'ConfigParser':
        return cls.from_readers((StringIO(i) for i in texts), defaults)

    @classmethod
    def from_files(
        cls, paths: Iterable[str], defaults: Defaults = (), *,
        encoding: str | None = None,
        path_resolver: PathResolver = expand_path
    ) -> 'ConfigParser':
        """Read config files in order, e.g. a system wide one
        and then `~/.myapprc` overriding it.

        Hint:
            A file which is NOT FOUND or NOT READABLE is logged and skipped,
            the others are still read.
        """
        from .parser import IniParser

        ret = cls(defaults)
        for i in paths:
            IniParser.readpath(i, ret, encoding, path_resolver)
        return ret

    @classmethod
    def from_file(
        cls, path: str, defaults: Defaults = (), *,
        encoding: str | None = None,
        path_resolver: PathResolver = expand_path
    ) -> 'ConfigParser':
        return cls.from_files(
            [path], defaults,
            encoding=encoding, path_resolver=path_resolver)

    # -------- mapping protocol --------

    def __getitem__(self, key: str) -> IniSectionProxy:
        if key not in self.__sections:
            raise NoSuchSection(key)
        return IniSectionProxy(key, self.__sections[key], self.__defaults)

    def __setitem__(
        self,
        key: str,
        value: IniSectionProxy | Mapping[str, str]
    ) -> None:
        self.__sections[key] = (
            value._data.copy()
            if isinstance(value, IniSectionProxy)
            # shouldn't keep ptr to external dict.
            else dict(value)
        )

    def __delitem__(self, key: str) -> None:
        self.remove_section(key)

    def __contains__(self, key: object) -> bool:
        return key in self.__sections

    def __len__(self) -> int:
        return len(self.__sections)

    def __iter__(self) -> Iterator[str]:
        return iter(self.__sections)

    def __repr__(self) -> str:
        return '<%s { .sections = %d, .defaults = %d }>' % (
            type(self).__name__, len(self), len(self.__defaults))

    def __str__(self) -> str:
        return self.to_text()

    # -------- sections & options --------

    @property
    def defaults(self) -> Mapping[str, str]:
        return self.__defaults

    def add_section(self, section: str) -> None:
        if section in self.__sections:
            raise DuplicateSection(section)
        self.__sections[section] = {}

    def remove_section(self, section: str) -> None:
        if self.__sections.pop(section, None) is None:
            raise NoSuchSection(section)

    def has_section(self, section: str) -> bool:
        return section in self.__sections

    def has_option(self, section: str, option: str) -> bool:
        if section not in self.__sections:
            raise NoSuchSection(section)
        return (option in self.__sections[section]
                or option in self.__defaults)

    def set(self, section: str, option: str, value: str) -> None:
        """Set (or override) an option, adding the section if needed."""
        self.__sections.setdefault(section, {})[option] = value

    def remove_option(self, section: str, option: str) -> None:
        if section not in self.__sections:
            raise NoSuchSection(section)
        if self.__sections[section].pop(option, None) is None:
            raise NoSuchOption(f'{section}:{option}')

    def sections(self) -> list[str]:
        return list(self.__sections)

    def options(self, section: str) -> list[tuple[str, str]]:
        """(key, raw value) pairs of the section itself, no defaults."""
        if section not in self.__sections:
            raise NoSuchSection(section)
        return list(self.__sections[section].items())

    # -------- fetching --------

    def __default(self, section: str, option: str) -> str:
        if option in self.__defaults:
            return self.__defaults[option]
        if section in self.__sections:
            raise NoSuchOption(f'{section}:{option}')
        raise NoSuchSection(section)

    def get_raw(self, section: str, option: str) -> str:
        """The value as written, falling back to the defaults."""
        opts = self.__sections.get(section)
        if opts is not None and option in opts:
            return opts[option]
        return self.__default(section, option)

    def _get_interp(
        self, section: str, option: str, expanded: "set[str]"
    ) -> str:
        opts = self.__sections.get(section)
        if opts is not None and option in opts:
            return interpolate(self, section, option, opts[option], expanded)
        # defaults are given as is.
        return self.__default(section, option)

    def get(self, section: str, option: str) -> str:
        """The value with every `%(name)s` resolved.

        Note: unlike `dict.get()`, there's no fallback argument;
        a missing option raises `NoSuchOption` / `NoSuchSection`.
        """
        return self._get_interp(section, option, set())

    def getboolean(self, section: str, option: str) -> bool:
        return cast_bool(self.get(section, option))

    def getuint(self, section: str, option: str) -> int:
        return cast_uint(self.get(section, option))

    def getint(self, section: str, option: str) -> int:
        return cast_int(self.get(section, option))

    def getfloat(self, section: str, option: str) -> float:
        return cast_float(self.get(section, option))

    # -------- output --------

    def to_writer(self, buf: TextIOBase) -> None:
        from .parser import IniParser
        IniParser.writestream(self, buf)

    def to_text(self) -> str:
        buf = StringIO()
        self.to_writer(buf)
        return buf.getvalue()

    def to_file(self, path: str, encoding: str = 'utf-8') -> None:
        from .parser import IniParser
        IniParser(path, encoding).write(self)

# -*- encoding: utf-8 -*-
# @File   : paths.py
# @Time   : 2024/10/13 10:02:47
# @Author : Kariko Lin

"""Turning user supplied config paths into something `open()` accepts.

`ConfigParser.from_files()` takes any `str -> str` callable as its
`path_resolver`; `expand_path` is only the default one.
"""

from os.path import abspath, expanduser
from typing import Callable

PathResolver = Callable[[str], str]


def expand_path(path: str) -> str:
    """Expand a leading `~` or `~user`, then make the path absolute.

    Raises `OSError` if the home directory can't be found.
    """
    expanded = expanduser(path)
    if expanded.startswith('~'):
        # expanduser() hands back the input untouched on failure.
        raise OSError(f'Cannot resolve home directory of "{path}"')
    return abspath(expanded)

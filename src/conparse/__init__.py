# -*- encoding: utf-8 -*-
# @File   : __init__.py
# @Time   : 2024/10/12 21:30:44
# @Author : Kariko Lin

import logging

from .errors import (
    FetchError,
    FetchErrorKind,
    NoSuchSection,
    NoSuchOption,
    DuplicateSection,
    InterpolationError,
    InterpolationCircularity,
    InvalidLiteral
)
from .ini import ConfigParser, IniSectionProxy, IniParser, ContinuationReader
from .paths import expand_path

__all__ = [
    'ConfigParser', 'IniSectionProxy', 'IniParser', 'ContinuationReader',
    'FetchError', 'FetchErrorKind', 'NoSuchSection', 'NoSuchOption',
    'DuplicateSection', 'InterpolationError', 'InterpolationCircularity',
    'InvalidLiteral', 'expand_path'
]

logging.basicConfig(level=logging.INFO,
                    format='[%(asctime)s] %(levelname)s: %(message)s')

# -*- encoding: utf-8 -*-
# @File   : __init__.py
# @Time   : 2024/10/13 00:21:15
# @Author : Kariko Lin

from .grammar import IniGrammar, LineKind
from .model import ConfigParser, IniSectionProxy
from .parser import IniParser
from .reader import ContinuationReader

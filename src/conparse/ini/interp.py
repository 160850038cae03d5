# -*- encoding: utf-8 -*-
# @File   : interp.py
# @Time   : 2024/10/13 14:51:09
# @Author : Kariko Lin

"""`%(name)s` interpolation.

The placeholder is replaced by the (interpolated, again) value of option
`name` in the SAME section, or by the default of `name` when the section
lacks it. This goes on until no placeholder is left:

    ```ini
    [default]
    host : myhost.mydomain.org
    port : 10342
    app_uri : http://%(host)s:%(port)s/v1/myapp
    ```

Every name substituted during one `get()` is remembered, and meeting it
again means a loop (`a -> b -> c -> a`), which is an error rather than
a hang.
"""

import logging
from typing import TYPE_CHECKING

from ..errors import (
    FetchError,
    InterpolationCircularity,
    InterpolationError
)

if TYPE_CHECKING:
    from .model import ConfigParser


def interpolate(
    cp: 'ConfigParser', section: str, option: str,
    raw: str, expanded: set[str]
) -> str:
    """Resolve all placeholders of `raw`, the raw value of
    `[section] option`.

    `expanded` MUST be shared by the whole resolution of one `get()`.
    """
    ret = raw
    while (m := cp.grammar.placeholder(ret)) is not None:
        text, oname = m[1], m[2]
        if oname == option or oname in expanded:
            logging.warning(
                'Option %s has already been expanded, '
                'circular definition in [%s]?', oname, section)
            raise InterpolationCircularity(f'{section}:{oname}')

        logging.debug('Expanding %s in [%s] %s', oname, section, option)
        expanded.add(oname)
        try:
            value = cp._get_interp(section, oname, expanded)
        except InterpolationCircularity:
            raise
        except FetchError as e:
            logging.warning(
                'Error in lookup for interpolation of %s:%s: %s',
                section, oname, e)
            raise InterpolationError(f'{section}:{oname}') from e
        ret = ret.replace(text, value)
    return ret

# -*- coding: utf-8 -*
"""Build dictionaries from variables, keyed by the variables' own names.

The macro lives in ``dictmaker.syntax``; it requires ``mcpyrate``::

    from dictmaker.syntax import macros, make_dictionary

    x, y = 1, 2
    d = make_dictionary[x, y]  # --> {"x": x, "y": y}

The diagnostics machinery the macro reports through is in ``dictmaker.diagnostics``,
and the exception types in ``dictmaker.errors``.
"""

__version__ = '0.1.0'

from .diagnostics import *  # noqa: F401, F403
from .errors import *  # noqa: F401, F403

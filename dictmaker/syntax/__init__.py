# -*- coding: utf-8 -*-
"""dictmaker.syntax: the ``make_dictionary[]`` macro.

Requires `mcpyrate`.

Usage::

    from dictmaker.syntax import macros, make_dictionary
"""

# --------------------------------------------------------------------------------
# This module only re-exports the macro interfaces so the macros can be imported
# by `from dictmaker.syntax import macros, ...`. The submodules contain the actual
# macro interfaces (and their docstrings), as well as the syntax transformers
# (i.e. regular functions that process ASTs) that implement the macros.
# --------------------------------------------------------------------------------

from .makedict import *  # noqa: F401, F403

from .makedict import make_dictionary

# Every macro this package provides, by name. Can be passed directly to
# `mcpyrate.expander.MacroExpander` to expand trees without the import hook.
macro_bindings = {"make_dictionary": make_dictionary}

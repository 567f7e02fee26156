# -*- coding: utf-8 -*-
"""Build a dictionary from variables, using their names as the keys."""

__all__ = ["make_dictionary", "build_dictionary"]

from ast import Dict, Constant, copy_location

from unpythonic.dynassign import dyn

from ..diagnostics import diagnostic_at
from ..errors import EmptyInput, InvalidArgument, DuplicateKey
from .nameutil import getbarename, getarguments

def make_dictionary(tree, *, syntax, expander, **kw):
    """[syntax, expr] Make a dictionary of variables, keyed by their names.

    Example::

        x = 2
        y = 3
        make_dictionary[x, y]  # --> {"x": 2, "y": 3}

    The transformation is::

        make_dictionary[x, y] --> {"x": x, "y": y}

    so the values are looked up at run time, like any other reference to
    ``x`` and ``y`` would be. The order of the entries is the order of the
    arguments.

    Each argument must be a bare name; ``make_dictionary[a.b]``,
    ``make_dictionary[f()]``, ``make_dictionary[a, 1]`` and such are
    rejected at macro expansion time. So are duplicate names
    (``make_dictionary[a, b, a]``), as well as the empty invocation
    ``make_dictionary[()]``.

    On rejection, one diagnostic is reported via the dynvar
    ``report_diagnostic`` (see `dictmaker.diagnostics`), and then
    a `dictmaker.errors.DictionaryMakerError` (a ``SyntaxError``)
    is raised, failing the macro expansion.
    """
    if syntax != "expr":
        raise SyntaxError("make_dictionary is an expr macro only")  # pragma: no cover

    # Expand outside-in. The arguments must be bare names, so there is nothing
    # inside them that could be a macro invocation.
    return build_dictionary(getarguments(tree),
                            anchor=kw.get("invocation", tree),
                            filename=expander.filename)

# --------------------------------------------------------------------------------
# Syntax transformers

def build_dictionary(arguments, anchor=None, *, filename=None, report=None):
    """Validate ``arguments`` and build the dictionary display AST.

    This is the syntax transformer behind ``make_dictionary[]``, usable also
    without the macro expander.

    Parameters:

        ``arguments``: sequence of AST nodes
            the arguments of the invocation, in order

        ``anchor``: AST node or ``None``
            the whole invocation; an empty argument list is reported here.
            The output gets its source location from this node. If ``None``,
            the first argument is used.

        ``filename``: ``str`` or ``None``
            recorded in the diagnostic, if one is reported

        ``report``: callable or ``None``
            the diagnostic sink, called with one `Diagnostic` before raising.
            If ``None``, the current value of the dynvar ``report_diagnostic``.

    Returns an ``ast.Dict`` with one entry per argument, keyed by the argument
    names as string constants. The values are the argument nodes themselves.

    Raises `EmptyInput`, `InvalidArgument` or `DuplicateKey`. Checking stops
    at the first problem found, so at most one diagnostic is ever reported.
    """
    if report is None:
        report = dyn.report_diagnostic

    def fail(exctype, node):
        diagnostic = diagnostic_at(node, exctype.message, filename=filename)
        report(diagnostic)
        return exctype(diagnostic)

    if not arguments:
        raise fail(EmptyInput, anchor)

    seen = set()
    keys = []
    values = []
    for arg in arguments:
        key = getbarename(arg)
        if key is None:
            raise fail(InvalidArgument, arg)
        if key in seen:
            raise fail(DuplicateKey, arg)
        keys.append(copy_location(Constant(value=key), arg))
        values.append(arg)
        seen.add(key)

    return copy_location(Dict(keys=keys, values=values),
                         anchor if anchor is not None else arguments[0])

# -*- coding: utf-8 -*-
"""Source-anchored diagnostics reported by ``make_dictionary[]``.

A failing expansion reports exactly one diagnostic, and then raises. Reporting
goes through the dynvar ``report_diagnostic``; by default it prints a
compiler-style line to ``sys.stderr``. To customize, rebind it for the dynamic
extent of the macro expansion::

    from unpythonic import dyn

    with dyn.let(report_diagnostic=mysink):
        ...  # import (or otherwise expand) the code using make_dictionary[]

To just grab the diagnostics, e.g. in tests, see ``collect_diagnostics``.
"""

__all__ = ["Diagnostic", "diagnostic_at", "print_diagnostic", "collect_diagnostics"]

from collections import namedtuple
from contextlib import contextmanager
import sys

from unpythonic.dynassign import dyn, make_dynvar

Diagnostic = namedtuple("Diagnostic", ["filename", "lineno", "col_offset", "message", "severity"])
Diagnostic.__doc__ = """A compiler message anchored to a source location.

``lineno`` and ``col_offset`` are taken from the AST node the message is
anchored to, so they follow the conventions of the ``ast`` module (lines
1-based, columns 0-based). Either may be ``None`` if the node has no
location information (e.g. it was produced by another macro that didn't
bother to fill it in).
"""

def diagnostic_at(node, message, *, filename=None, severity="error"):
    """Create a `Diagnostic` with ``message``, anchored at the AST ``node``."""
    return Diagnostic(filename=filename,
                      lineno=getattr(node, "lineno", None),
                      col_offset=getattr(node, "col_offset", None),
                      message=message,
                      severity=severity)

def print_diagnostic(diagnostic):
    """Default diagnostic sink.

    The print format looks like::

        /home/developer/codes/foo.py:42:18: error: Duplicated key

    The column is 1-based, matching ``SyntaxError.offset``.
    """
    d = diagnostic
    column = d.col_offset + 1 if d.col_offset is not None else None
    location = ":".join(str(x) for x in (d.filename or "<unknown>", d.lineno, column)
                        if x is not None)
    print(f"{location}: {d.severity}: {d.message}", file=sys.stderr)

@contextmanager
def collect_diagnostics():
    """Context manager. Capture reported diagnostics into a list instead of printing them.

    Usage::

        with collect_diagnostics() as diagnostics:
            ...  # expand something
        assert len(diagnostics) <= 1
    """
    diagnostics = []
    with dyn.let(report_diagnostic=diagnostics.append):
        yield diagnostics

make_dynvar(report_diagnostic=print_diagnostic)

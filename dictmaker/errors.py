# -*- coding: utf-8 -*-
"""Exception types raised when ``make_dictionary[]`` refuses to expand.

All of them are ``SyntaxError``, so `mcpyrate` reports them at the use site of
the macro, like any other macro usage error.
"""

__all__ = ["DictionaryMakerError", "EmptyInput", "InvalidArgument", "DuplicateKey"]

class DictionaryMakerError(SyntaxError):
    """Base class for ``make_dictionary[]`` expansion failures.

    ``diagnostic`` is the `dictmaker.diagnostics.Diagnostic` that was reported
    just before this exception was raised. The standard ``SyntaxError`` fields
    (``filename``, ``lineno``, ``offset``) are filled in from it.
    """
    message = None  # overridden in subclasses

    def __init__(self, diagnostic):
        # SyntaxError offsets are 1-based; AST col_offsets are 0-based.
        offset = diagnostic.col_offset + 1 if diagnostic.col_offset is not None else None
        super().__init__(diagnostic.message, (diagnostic.filename, diagnostic.lineno, offset, None))
        self.diagnostic = diagnostic

    def __reduce__(self):  # copy, pickle
        return (type(self), (self.diagnostic,))

class EmptyInput(DictionaryMakerError):
    """No arguments were given."""
    message = "Empty input"

class InvalidArgument(DictionaryMakerError):
    """An argument is not a bare identifier."""
    message = "Incorrect input"

class DuplicateKey(DictionaryMakerError):
    """The same identifier appears more than once."""
    message = "Duplicated key"

# -*- coding: utf-8 -*-
"""Utilities for working with identifiers and argument lists in macros.

What ``make_dictionary[]`` accepts as an argument is a *bare identifier*: an
``ast.Name`` and nothing else. Attributes, hygienic captures, literals, calls,
starred expressions and operator expressions do not qualify, because they have
no name that could serve as a dictionary key.
"""

__all__ = ["getbarename", "isbarename", "getarguments"]

from ast import Name, Tuple

def getbarename(tree):
    """If ``tree`` is a bare identifier, return its name as str.

    If no match on ``tree``, return ``None``.
    """
    if type(tree) is Name:
        return tree.id
    return None

def isbarename(tree):
    """Test whether ``tree`` is a bare identifier."""
    return getbarename(tree) is not None

def getarguments(tree):
    """Unpack the subscript slice of an expr macro invocation into a list of arguments.

    This is the argument list as the user sees it::

        mac[a, b, c]  # --> [a, b, c]
        mac[a]        # --> [a]
        mac[()]       # --> [], the only way to spell an empty subscript

    The returned nodes are the original subtrees, not copies.
    """
    if type(tree) is Tuple:
        return list(tree.elts)
    return [tree]

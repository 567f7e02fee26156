# -*- coding: utf-8 -*-
#
"""setuptools-based setup.py for dictmaker.

Usage as usual with setuptools:
    python3 setup.py build
    python3 setup.py sdist
    python3 setup.py bdist_wheel
    python3 setup.py install

For details, see
    http://setuptools.readthedocs.io/en/latest/setuptools.html#command-reference
"""

import ast
import os

from setuptools import setup  # type: ignore[import]


def read(*relpath, **kwargs):  # https://blog.ionelmc.ro/2014/05/25/python-packaging/#the-setup-script
    with open(os.path.join(os.path.dirname(__file__), *relpath),
              encoding=kwargs.get('encoding', 'utf8')) as fh:
        return fh.read()

# Extract __version__ from the package __init__.py
# (since it's not a good idea to actually run __init__.py during the build process).
init_py_path = os.path.join(os.path.dirname(__file__), "dictmaker", "__init__.py")
version = None
try:
    with open(init_py_path) as f:
        for line in f:
            if line.startswith("__version__"):
                module = ast.parse(line, filename=init_py_path)
                expr = module.body[0]
                assert isinstance(expr, ast.Assign)
                v = expr.value
                assert isinstance(v, ast.Constant)
                version = v.value
                break
except FileNotFoundError:
    pass
if not version:
    raise RuntimeError(f"Version information not found in {init_py_path}")

#########################################################
# Call setup()
#########################################################

setup(
    name="dictmaker",
    version=version,
    # The unit tests in `dictmaker.tests` and `dictmaker.syntax.tests` are NOT deployed.
    packages=["dictmaker", "dictmaker.syntax"],
    provides=["dictmaker"],
    keywords=["syntactic-macros", "macros", "dictionary", "metaprogramming"],
    # `unpythonic` provides the dynamic variable for the diagnostic sink, and the test framework.
    install_requires=["mcpyrate>=3.0.0", "unpythonic>=0.15.0"],
    python_requires=">=3.9",
    description="Build dictionaries from variables, keyed by the variables' own names.",
    long_description=read("README.md"),
    long_description_content_type="text/markdown",
    license="BSD",
    classifiers=["Development Status :: 4 - Beta",
                 "Environment :: Console",
                 "Intended Audience :: Developers",
                 "License :: OSI Approved :: BSD License",
                 "Programming Language :: Python",
                 "Programming Language :: Python :: 3",
                 "Programming Language :: Python :: Implementation :: CPython",
                 "Topic :: Software Development :: Libraries",
                 "Topic :: Software Development :: Libraries :: Python Modules"
                 ],
    zip_safe=False  # macros are not zip safe, because the zip importer fails to find sources.
)

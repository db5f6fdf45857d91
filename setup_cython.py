"""Build script for Cython extensions.

Usage:
    pip install -e ".[cython]"
    python setup_cython.py build_ext --inplace

This compiles radixset/node.py and radixset/tree.py into shared-object
(.so / .pyd) files that Python imports in place of the pure-Python modules.
"""

from setuptools import setup, Extension
from Cython.Build import cythonize

extensions = [
    Extension(
        "radixset.node",
        ["radixset/node.py"],
    ),
    Extension(
        "radixset.tree",
        ["radixset/tree.py"],
    ),
]

setup(
    name="radixset-cython",
    ext_modules=cythonize(
        extensions,
        compiler_directives={
            "language_level": "3",
            "boundscheck": False,
            "wraparound": False,
        },
    ),
)

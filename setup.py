"""
Build script for htmlcss.

Metadata lives in pyproject.toml. Setting HTMLCSS_USE_MYPYC=1 compiles the
tokenizers and parsers with mypyc:

    HTMLCSS_USE_MYPYC=1 pip install .[mypyc]
"""

import os

from setuptools import setup

# The selector and node modules stay interpreted: their class hierarchies
# rely on class-level attributes that mypyc does not handle.
MYPYC_MODULES = [
    "src/htmlcss/tokenizer.py",
    "src/htmlcss/parser.py",
    "src/htmlcss/css_tokenizer.py",
    "src/htmlcss/css_parser.py",
]


def mypyc_extensions():
    from mypyc.build import mypycify

    return mypycify(MYPYC_MODULES, opt_level=os.environ.get("MYPYC_OPT_LEVEL", "3"))


if __name__ == "__main__":
    use_mypyc = os.environ.get("HTMLCSS_USE_MYPYC", "0") == "1"
    setup(ext_modules=mypyc_extensions() if use_mypyc else [])

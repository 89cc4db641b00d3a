#!/usr/bin/env python
#encoding: utf8

import io
import os
import re

from setuptools import setup
from setuptools import find_packages


with io.open(os.path.join(os.path.dirname(__file__), 'kwlist', '__init__.py'), 'r') as v:
    VERSION = re.match(r".*__version__ = '(.*?)'", v.read(), re.S).group(1)

SHORT_DESC="An immutable ordered list of (key, value) pairs with repeatable" \
" keys, for option lists and other small dict-like collections."

LONG_DESC = """kwlist is a keyword list: a tuple of (key, value) pairs where keys
may repeat. Lookups resolve to the first entry for a key, while put, delete,
update and merge follow well-defined rules for what happens to duplicates.
It ships with an lxml-based codec that maps keyword lists to xml documents
without losing order or duplicates.
"""

try:
    os.stat('CHANGELOG.rst')
    with io.open('CHANGELOG.rst', 'rb') as f:
        LONG_DESC += u"\n\n" + f.read().decode('utf8')
except OSError:
    pass


setup(
    name='kwlist',
    packages=find_packages(exclude=['kwlist.test', 'kwlist.test.*']),

    version=VERSION,
    description=SHORT_DESC,
    long_description=LONG_DESC,
    classifiers=[
        'Programming Language :: Python',
        'Programming Language :: Python :: 3',
        'Programming Language :: Python :: Implementation :: CPython',
        'Programming Language :: Python :: Implementation :: PyPy',
        'Operating System :: OS Independent',
        'Natural Language :: English',
        'Development Status :: 4 - Beta',
        'Intended Audience :: Developers',
        'Topic :: Software Development :: Libraries :: Python Modules',
    ],
    keywords='keyword list multidict ordered dict options xml',
    author='kwlist contributors',
    license='LGPL-2.1',
    zip_safe=False,
    python_requires='>=3.6',
    install_requires=[
      'lxml',
    ],

    extras_require={
        'test': [
            'pytest',
            'pytest-cov',
        ],
    },
)

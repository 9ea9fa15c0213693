#!/usr/bin/env python

from setuptools import setup

with open('bimap/version.txt') as v:
    version = v.read().strip()

classifiers = '''
Development Status :: 3 - Alpha
License :: Public Domain
Programming Language :: Python :: 3
'''

setup(name='bimap',
      version=version,
      description='A string lookup table searchable by key or by value',
      classifiers=list(filter(None, classifiers.split('\n'))),
      package_data={'': ['version.txt']},
      packages=['bimap'],
      python_requires='>=3.8',
      extras_require={'test': ['pytest', 'mock']})

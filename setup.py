#!/usr/bin/env python3

from setuptools import setup
from io import open

with open('README.txt') as file:
    long_description = file.read()

setup(name='ipfixreg',
      version='0.1.0',
      description='IANA IPFIX Information Element registry generator',
      long_description = long_description,
      author='Brian Trammell',
      author_email='brian@trammell.ch',
      url='http://github.com/britram/python-ipfix',
      packages=['ipfixreg'],
      scripts=['scripts/ipfix-gen-registry'],
      python_requires='>=3.6',
      extras_require={'test': ['pytest']},
      classifiers=["Development Status :: 3 - Alpha",
                   "Intended Audience :: Developers",
                   "License :: OSI Approved :: "
                   "GNU Lesser General Public License v3 or later (LGPLv3+)",
                   "Operating System :: OS Independent",
                   "Programming Language :: Python :: 3",
                   "Topic :: System :: Networking"]
      )

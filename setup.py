#!/usr/bin/env python

from setuptools import setup

import tagkit.info


with open('README.rst') as f:
    long_description = f.read()

setup(name=tagkit.info.name,
      version=tagkit.info.version,
      description=tagkit.info.title,
      long_description=long_description,
      author="tagkit contributors",
      url=tagkit.info.home,
      packages=['tagkit'],
      python_requires='>=3.6',
      classifiers=['Development Status :: 3 - Alpha',
                   'Intended Audience :: Developers',
                   'Natural Language :: English',
                   'License :: OSI Approved :: BSD License',
                   'Operating System :: OS Independent',
                   'Programming Language :: Python',
                   'Programming Language :: Python :: 3',
                   'Topic :: Internet :: WWW/HTTP :: Dynamic Content',
                   'Topic :: Text Processing :: Markup :: HTML',
                   'Topic :: Software Development :: '
                   'Libraries :: Python Modules']
      )

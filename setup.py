#!/usr/bin/env python
import re

from setuptools import setup, find_packages


with open('README.md') as f:
    readme = f.read()

version_regex = re.compile(r"VERSION\s*=\s*'(.*?)'$", re.M)
with open('reportbook/__init__.py') as stream:
    VERSION = version_regex.search(stream.read()).group(1)


setup(
    name='reportbook',
    version=VERSION,
    description='Persistence layer for user submitted location reports',
    long_description=readme,
    long_description_content_type='text/markdown',
    license='MIT',
    packages=find_packages(exclude=['tests', 'tests.*']),
    include_package_data=True,
    python_requires='>=3.7',
    install_requires=[
        'peewee>=3.14',
        'PyYAML>=5.1',
    ],
    extras_require={
        'test': [
            'flexmock',
            'freezegun',
            'pytest',
        ],
    },
    entry_points={
        'console_scripts': [
            'reportbook=reportbook.runner:main'
        ]
    },
    classifiers=[
        'Development Status :: 4 - Beta',
        'License :: OSI Approved :: MIT License',
        'Programming Language :: Python',
        'Programming Language :: Python :: 3',
    ],
)

#!/usr/bin/env python
import re
from pathlib import Path
from setuptools import find_packages, setup

ROOT = Path(__file__).parent
VERSION_RE = re.compile(r'''__version__ = ['"]([0-9.]+)['"]''')

requires = [
    'botocore>=1.36.0,<2.0a.0',
]


def get_version():
    init = (ROOT / 'checksumcombine' / '__init__.py').read_text()
    return VERSION_RE.search(init).group(1)


setup(
    name='checksum-combine',
    version=get_version(),
    description='Combine Adler-32 and CRC-64 checksums without rehashing',
    long_description=(ROOT / 'README.rst').read_text(),
    author='Amazon Web Services',
    packages=find_packages(exclude=['tests*']),
    include_package_data=True,
    install_requires=requires,
    extras_require={
        'crt': 'botocore[crt]>=1.36.0,<2.0a.0',
        'tests': ['pytest'],
    },
    license="Apache License 2.0",
    python_requires=">= 3.8",
    classifiers=[
        'Development Status :: 3 - Alpha',
        'Intended Audience :: Developers',
        'Natural Language :: English',
        'License :: OSI Approved :: Apache Software License',
        'Programming Language :: Python',
        'Programming Language :: Python :: 3',
        'Programming Language :: Python :: 3 :: Only',
        'Programming Language :: Python :: 3.8',
        'Programming Language :: Python :: 3.9',
        'Programming Language :: Python :: 3.10',
        'Programming Language :: Python :: 3.11',
        'Programming Language :: Python :: 3.12',
        'Programming Language :: Python :: 3.13',
    ],
)

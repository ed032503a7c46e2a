# #!/usr/bin/env python

"""setup.py script for py_unitquery library"""

from setuptools import setup

setup(
    name='py_unitquery',
    version='1.0.0',
    description='Parser for free-form unit conversion queries',
    packages=['py_unitquery'],
    python_requires='>=3.9',
    install_requires=[
        'typing_extensions>=4.12.2',
        'tomli>=2.0.1; python_version<"3.11"',
    ],
    extras_require={
        'test': [
            'pytest',
        ],
    },
    classifiers=[
        'Programming Language :: Python :: 3',
        'Operating System :: OS Independent',
    ],
)

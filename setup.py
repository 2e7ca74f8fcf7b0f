#!/usr/bin/env python3

"""Installation procedure for nodalvtk"""

from setuptools import setup, find_packages

setup(
    name="nodalvtk",
    version="1.0",
    author="Dennis Gläser",
    author_email="dennis.glaeser@iws.uni-stuttgart.de",
    packages=find_packages(where=".", include=["nodalvtk", "nodalvtk.*"]),
    python_requires=">=3.9",
    install_requires=["numpy", "meshio>=4.4", "colorama>=0.4.3"],
    extras_require={"test": ["pytest"]},
    entry_points={
        'console_scripts': ['nodalvtk=nodalvtk._cli:main'],
    }
)

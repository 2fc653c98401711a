#!/usr/bin/env python
"""
Setup.py for antennagraph.

Install with: pip install -e .
Test extras:  pip install -e .[test]
"""

from setuptools import setup, find_packages

setup(
    name="antennagraph",
    version="0.1.0",
    description="Graph analysis of antenna maps: same-frequency adjacency, traversal and path enumeration",
    packages=find_packages(exclude=["tests", "tests.*"]),
    python_requires=">=3.8",
    install_requires=[
        "numpy>=1.21",
    ],
    extras_require={
        "test": [
            "pytest>=7.0",
        ],
    },
    entry_points={
        "console_scripts": [
            "antennagraph=antennagraph.__main__:main",
        ],
    },
)

#!/usr/bin/env python3
"""Setup script for designbible-tools package."""

from setuptools import setup, find_packages

setup(
    name="designbible-tools",
    version="0.1.0",
    description="Design bible parser, spoiler gallery and card art toolkit",
    author="Design Bible Project",
    packages=find_packages(exclude=["tests", "tests.*"]),
    package_data={
        "designbible": ["templates/*"],
    },
    include_package_data=True,
    install_requires=[
        "click>=8.0.0",
        "Pillow>=10.0.0",
        "PyYAML>=6.0",
        "google-genai>=0.3.0",
        "python-dotenv>=1.0.0",
    ],
    extras_require={
        "dev": ["pytest>=7.0"],
    },
    entry_points={
        "console_scripts": [
            "designbible=designbible.cli:cli",
        ],
    },
    python_requires=">=3.10",
)

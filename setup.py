#!/usr/bin/env python
import importlib.util
from pathlib import Path

from setuptools import setup, find_packages

spec = importlib.util.spec_from_file_location(
    "rcopy.version",
    "src/rcopy/version.py",
)
module = importlib.util.module_from_spec(spec)
spec.loader.exec_module(module)
VERSION = module.__version__


setup(
    name="rcopy",
    version=VERSION,
    description="Copy files and directory trees from the command line",
    long_description=Path("README.rst").read_text(encoding="utf-8"),
    long_description_content_type="text/x-rst",
    license="Apache-2.0",
    entry_points={"console_scripts": ["rcopy=rcopy.cli:main"]},
    install_requires=[
        "click>=8.0",
    ],
    packages=find_packages(where="src"),
    package_dir={"": "src"},
    include_package_data=True,
    python_requires=">=3.10",
    extras_require={
        "tests": ["pytest"],
    },
    classifiers=[
        "Development Status :: 3 - Alpha",
        "Environment :: Console",
        "Intended Audience :: Developers",
        "Intended Audience :: System Administrators",
        "Programming Language :: Python",
        "Programming Language :: Python :: 3.10",
        "Programming Language :: Python :: 3.11",
        "Programming Language :: Python :: 3.12",
        "Topic :: System :: Filesystems",
        "Topic :: Utilities",
    ],
)

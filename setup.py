#!/usr/bin/env python3

import pathlib

from setuptools import find_packages, setup

HERE = pathlib.Path(__file__).parent

# Handle README.md that might not exist in Docker build
try:
    README = (HERE / "README.md").read_text()
except FileNotFoundError:
    README = "Identify files by their magic numbers and restore lost extensions"

setup(
    name="extrestore",
    version="1.0.0",
    description="Identify files by their magic numbers and restore lost extensions",
    long_description=README,
    long_description_content_type="text/markdown",
    author="Marc Rivero",
    author_email="mriverolopez@gmail.com",
    url="https://github.com/seifreed/extrestore",
    packages=find_packages(include=["extrestore", "extrestore.*"]),
    package_data={"extrestore": ["data/*.db"]},
    classifiers=[
        "Development Status :: 4 - Beta",
        "Intended Audience :: Developers",
        "Intended Audience :: Information Technology",
        "License :: OSI Approved :: GNU General Public License v3 (GPLv3)",
        "Operating System :: OS Independent",
        "Programming Language :: Python :: 3",
        "Programming Language :: Python :: 3.13",
        "Topic :: Security",
        "Topic :: System :: Recovery Tools",
    ],
    python_requires=">=3.10",
    install_requires=[
        "rich>=13.7.0",
        "click>=8.2.0",
        "pyfiglet>=0.8.post1",
    ],
    extras_require={
        "test": [
            "pytest>=7.4.0",
        ],
    },
    entry_points={
        "console_scripts": [
            "extrestore=extrestore.cli:main",
        ],
    },
    include_package_data=True,
    zip_safe=False,
)

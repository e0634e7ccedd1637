# -*- coding: utf-8 -*-
import os
import re

from setuptools import find_packages, setup

with open("guessgame/__init__.py") as f:
    version = re.search(r'__version__ = "(.*?)"', f.read()).group(1)


def read(fname):
    try:
        with open(os.path.join(os.path.dirname(__file__), fname), "r") as fp:
            return fp.read().strip()
    except IOError:
        return ""


setup(
    name="guessgame",
    version=version,
    license="Apache 2.0",
    description="Guess the number, in your terminal",
    long_description=read("README.md"),
    long_description_content_type="text/markdown",
    keywords=["game", "guessing"],
    classifiers=[],
    zip_safe=False,
    python_requires=">=3.8",
    install_requires=[
        "click>=8.1.6",
        "fire>=0.6.0",
        'colorama>=0.4.6; platform_system == "Windows"',
        "appdirs>=1.4.4",
    ],
    extras_require={
        "test": ["pytest"],
    },
    packages=find_packages(exclude=["tests", "tests.*"]),
    include_package_data=True,
    entry_points={"console_scripts": ["guess = guessgame.__main__:main"]},
)

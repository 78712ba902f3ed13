#!/usr/bin/python
# -*- encoding: utf-8 -*-
import ast
import re

from setuptools import find_namespace_packages
from setuptools import setup

## The version number lives in calcollection/__init__.py only
_version_re = re.compile(r"__version__\s+=\s+(.*)")
with open("calcollection/__init__.py", "rb") as f:
    version = str(
        ast.literal_eval(_version_re.search(f.read().decode("utf-8")).group(1))
    )

if __name__ == "__main__":
    test_packages = [
        "pytest",
        "pytest-coverage",
        "coverage",
    ]

    setup(
        name="calcollection",
        version=version,
        description="CalDAV (RFC4791) calendar collection provider for servers",
        long_description=open("README.md").read(),
        long_description_content_type="text/markdown",
        classifiers=[
            "Development Status :: 4 - Beta",
            "Intended Audience :: Developers",
            "License :: OSI Approved :: Apache Software License",
            "Operating System :: OS Independent",
            "Programming Language :: Python",
            "Topic :: Office/Business :: Scheduling",
            "Topic :: Software Development :: Libraries " ":: Python Modules",
        ],
        keywords="",
        license="Apache",
        ## lib/ and elements/ have no __init__.py
        packages=find_namespace_packages(include=["calcollection", "calcollection.*"]),
        include_package_data=True,
        zip_safe=False,
        python_requires=">=3.10",
        install_requires=[
            "lxml",
            "requests",
            "icalendar",
            "typing_extensions",
        ],
        extras_require={
            "test": test_packages,
            "yaml": ["pyyaml"],
        },
    )

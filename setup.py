#!/usr/bin/env python

from setuptools import find_packages, setup

setup(
    name="xmlseccli",
    version="0.1.0",
    license="Apache Software License",
    author="xmlseccli contributors",
    description="XML Signature and XML Encryption through the xmlsec1 command line tool",
    long_description=open("README.rst").read(),
    python_requires=">=3.8",
    install_requires=[
        "lxml >= 5.2.1, < 6",  # Ubuntu 24.04 LTS
        "cryptography >= 43",
    ],
    extras_require={
        "tests": [
            "ruff",
            "coverage",
            "build",
            "wheel",
            "mypy",
            "lxml-stubs",
        ]
    },
    packages=find_packages(exclude=["test"]),
    platforms=["MacOS X", "Posix"],
    package_data={"xmlseccli": ["py.typed"]},
    include_package_data=True,
    test_suite="test",
    classifiers=[
        "Intended Audience :: Developers",
        "License :: OSI Approved :: Apache Software License",
        "Operating System :: MacOS :: MacOS X",
        "Operating System :: POSIX",
        "Programming Language :: Python",
        "Programming Language :: Python :: 3.8",
        "Programming Language :: Python :: 3.9",
        "Programming Language :: Python :: 3.10",
        "Programming Language :: Python :: 3.11",
        "Programming Language :: Python :: 3.12",
        "Topic :: Software Development :: Libraries :: Python Modules",
    ],
)

#!/usr/bin/env python

from setuptools import find_packages, setup  # type: ignore

setup(
    name="http-structured-fields",
    url="https://github.com/pyauth/http-structured-fields",
    license="Apache License 2.0",
    author="Andrey Kislyuk",
    author_email="kislyuk@gmail.com",
    description="A parser and canonical serializer for HTTP Structured Field Values (RFC 8941, RFC 9651)",
    long_description=open("README.rst").read(),
    use_scm_version={
        "write_to": "http_structured_fields/version.py",
        "fallback_version": "0.1.0",
    },
    install_requires=["typing-extensions >= 4.0.0"],
    extras_require={
        "tests": [
            "flake8",
            "coverage",
            "build",
            "wheel",
            "mypy",
            "ruff",
        ]
    },
    packages=find_packages(exclude=["test"]),
    include_package_data=True,
    package_data={
        "http_structured_fields": ["py.typed"],
    },
    platforms=["MacOS X", "Posix"],
    test_suite="test",
    classifiers=[
        "Intended Audience :: Developers",
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

#!/usr/bin/env python

"""The setup script."""

from setuptools import setup, find_packages

with open("README.rst") as readme_file:
    readme = readme_file.read()

requirements = ["requests>=2.27", "python-dotenv"]

test_requirements = [
    "pytest>=7",
    "pytest-mock",
    "pytest-socket",
]

setup(
    python_requires=">=3.10",
    classifiers=[
        "Development Status :: 3 - Alpha",
        "Intended Audience :: Developers",
        "License :: OSI Approved :: MIT License",
        "Natural Language :: English",
        "Programming Language :: Python :: 3",
        "Programming Language :: Python :: 3.10",
        "Programming Language :: Python :: 3.11",
        "Programming Language :: Python :: 3.12",
    ],
    description="Python client for the VW ID mobile API: vehicles, status and remote actions.",
    install_requires=requirements,
    extras_require={"test": test_requirements},
    license="MIT license",
    long_description=readme,
    include_package_data=True,
    keywords="vw_id_api",
    name="vw_id_api",
    packages=find_packages(include=["vw_id_api", "vw_id_api.*"]),
    test_suite="tests",
    tests_require=test_requirements,
    version="0.1.0",
    zip_safe=False,
)

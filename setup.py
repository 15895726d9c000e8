# -*- coding: utf-8 -*-
"""The setup script."""
import os
from typing import Dict

from setuptools import find_packages, setup


def read_version() -> str:
    version: Dict[str, str] = dict()
    path = os.path.join(os.path.dirname(os.path.abspath(__file__)), "reliadist", "_version.py")
    with open(path, "r") as fp:
        exec(fp.read(), version)
    return version["__version__"]


setup(
    name="reliadist",
    version=read_version(),
    description="Parametric random variables for structural reliability analysis",
    python_requires=">=3.8",
    packages=find_packages(include=["reliadist", "reliadist.*"]),
    package_data={"reliadist.core": ["configuration_schema.json"]},
    install_requires=[
        "numpy",
        "scipy",
        "jsonschema",
    ],
    extras_require={
        "test": ["pytest"],
    },
    classifiers=[
        "Programming Language :: Python :: 3",
        "Topic :: Scientific/Engineering :: Mathematics",
    ],
)

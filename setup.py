import os
import re

from setuptools import setup, find_packages


def read_version():
    path = os.path.join(os.path.dirname(__file__), "varsite", "_version.py")
    with open(path) as f:
        return re.search(r'version = "([^"]+)"', f.read()).group(1)


# Avoid pulling in dependencies when the docs are built on Read The Docs
if os.environ.get("READTHEDOCS") == "True":
    install_requires = []
else:
    install_requires = [
        "pysam>=0.18.0",
        "xopen>=1.2.0",
    ]

setup(
    name="varsite",
    version=read_version(),
    description="Discovered variant sites: coordinates, alleles and overlap queries",
    packages=find_packages(include=["varsite", "varsite.*"]),
    python_requires=">=3.8",
    install_requires=install_requires,
    extras_require={
        "dev": ["pytest", "hypothesis"],
    },
    entry_points={"console_scripts": ["varsite = varsite.__main__:main"]},
)

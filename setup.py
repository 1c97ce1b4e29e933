"""
Fallback setup.py for older pip versions that don't support pyproject.toml
"""
from setuptools import setup, find_packages

setup(
    name="memshim",
    version="0.1.0",
    packages=find_packages(include=("memshim", "memshim.*")),
    python_requires=">=3.10",
)

# setup.py
from setuptools import setup, find_packages

setup(
    name="sable",
    version="0.1.0",
    description="Tree-walking evaluator for a small S-expression language",
    packages=find_packages(include=["sable", "sable.*"]),
    python_requires=">=3.9",
    install_requires=[],
    extras_require={
        "test": ["pytest", "hypothesis>=6.82"],
    },
    zip_safe=False,
)

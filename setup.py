# setup.py
from setuptools import setup, find_namespace_packages

setup(
    name="sable",
    version="0.1.0",
    description="Reader and evaluation core for a small Scheme",
    packages=find_namespace_packages(include=["sable", "sable.*"]),
    python_requires=">=3.10",
    extras_require={
        "test": ["pytest", "hypothesis"],
    },
    zip_safe=False,
)

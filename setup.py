# setup.py
from setuptools import setup, find_packages

setup(
    name="schemer",
    version="0.1.0",
    description="Reader for Scheme-like S-expressions with a small primitive reducer",
    packages=find_packages(include=["schemer", "schemer.*"]),
    python_requires=">=3.10",
    extras_require={
        "test": ["pytest", "hypothesis"],
    },
    zip_safe=False,
)

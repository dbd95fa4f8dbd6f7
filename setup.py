# setup.py
from setuptools import setup, find_packages

setup(
    name="sprig",
    version="0.1.0",
    description="Embeddable S-expression evaluator with tiered effect capabilities",
    packages=find_packages(include=["sprig", "sprig.*"]),
    python_requires=">=3.10",
    install_requires=[],
    extras_require={
        "test": ["pytest", "hypothesis"],
    },
    zip_safe=False,
)

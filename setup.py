# setup.py
from setuptools import setup, find_packages

setup(
    name="scheep",
    version="0.2.0",
    description="A small metacircular Scheme evaluator with syntax-rules pattern matching",
    python_requires=">=3.10",
    packages=find_packages(include=["scheep", "scheep.*"]),
    package_data={"scheep": ["prelude/*.scm"]},
    install_requires=[],
    extras_require={
        "test": ["pytest>=7", "hypothesis>=6"],
    },
    entry_points={
        "console_scripts": ["scheep=scheep.__main__:main"],
    },
    zip_safe=False,
)

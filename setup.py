# setup.py
from setuptools import setup, find_packages

setup(
    name="eta",
    version="0.1.0",
    description="A small Lisp with tail calls and closures over chained environments",
    packages=find_packages(include=["eta", "eta.*"]),
    python_requires=">=3.10",
    install_requires=[
        "loguru",
        "prompt_toolkit",
    ],
    extras_require={
        "test": ["pytest", "hypothesis"],
    },
    entry_points={
        "console_scripts": ["eta=eta.cli:main"],
    },
    zip_safe=False,
)

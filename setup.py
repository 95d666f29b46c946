# setup.py
from setuptools import setup, find_packages

setup(
    name="ducklisp",
    version="0.3.0",
    description="A small tree-walking Lisp interpreter for embedding in server applications",
    packages=find_packages(include=["ducklisp", "ducklisp.*"]),
    python_requires=">=3.10",
    extras_require={
        "test": ["pytest>=7", "hypothesis>=6"],
    },
    entry_points={
        "console_scripts": ["ducklisp=ducklisp.__main__:main"],
    },
    zip_safe=False,
)

# setup.py
from setuptools import setup, find_packages

setup(
    name="conslisp",
    version="0.1.0",
    description="Evaluation core of a small Lisp: persistent cons lists and a call-dispatching evaluator",
    packages=find_packages(include=["conslisp", "conslisp.*"]),
    python_requires=">=3.10",
    extras_require={
        "test": ["pytest", "hypothesis"],
    },
    zip_safe=False,
)

# setup.py
from setuptools import setup, find_packages

setup(
    name="quill",
    version="0.1.0",
    description="Tree-walking evaluation core for the Quill expression language",
    packages=find_packages(include=["quill", "quill.*"]),
    python_requires=">=3.10",
    install_requires=[
        "rpds-py>=0.10",
    ],
    extras_require={
        "test": ["pytest>=7"],
    },
    zip_safe=False,
)

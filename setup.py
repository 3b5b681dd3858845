"""
This module configures the package for distribution and installation.
"""

from setuptools import setup, find_packages

setup(
    name="pyargand",
    version="0.0.0",
    packages=find_packages(exclude=["tests", "tests.*"]),
    python_requires=">=3.9",
    install_requires=["numpy", "pillow>=10.1", "pygame"],
    extras_require={"test": ["pytest"]},
    entry_points={
        "console_scripts": [
            "pyargand = pyargand.__main__:main",
        ]
    },
)

"""
Setup configuration for the project.
Allows the package to be installed in development mode.
"""

from setuptools import setup, find_packages

setup(
    name="algokit",
    version="1.0.0",
    description="Classic data structures and algorithms: linked list, quick sort, binary search",
    author="algokit contributors",
    packages=find_packages(exclude=["tests", "tests.*"]),
    py_modules=["main"],
    install_requires=[
        "python-dotenv>=1.0.0",
    ],
    extras_require={
        "test": [
            "pytest>=7.4.0",
            "pytest-cov>=4.1.0",
        ],
    },
    entry_points={
        "console_scripts": [
            "algokit-demo=main:main",
        ],
    },
    python_requires=">=3.8",
)

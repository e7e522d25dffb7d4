"""
Setup script for the fair-dice package.

Installs the `fair_dice` package from src/ and the `fair-dice`
console script.
"""

from setuptools import setup, find_packages

setup(
    name="fair-dice",
    version="1.0.0",
    description="Non-transitive dice game with provably fair commit-reveal rolls",
    python_requires=">=3.10",
    packages=find_packages(where="src"),
    package_dir={"": "src"},
    install_requires=[
        "python-dotenv>=1.0.0",
        "pydantic>=2.5.0",
    ],
    extras_require={
        "test": [
            "pytest>=7.0",
        ],
        "dev": [
            "pytest>=7.0",
            "build",
            "wheel",
        ],
    },
    entry_points={
        "console_scripts": [
            "fair-dice=fair_dice.cli:main",
        ],
    },
    classifiers=[
        "Development Status :: 4 - Beta",
        "Intended Audience :: Education",
        "Programming Language :: Python :: 3",
        "Programming Language :: Python :: 3.10",
        "Programming Language :: Python :: 3.11",
        "Programming Language :: Python :: 3.12",
        "Topic :: Games/Entertainment",
        "Topic :: Security :: Cryptography",
    ],
)

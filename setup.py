from setuptools import setup, find_packages

setup(
    name="power4",
    version="0.1.0",
    packages=find_packages(exclude=["tests", "tests.*"]),
    python_requires=">=3.8",
    install_requires=[
        "numpy",
        "gymnasium",  # Gymnasium environment for automated players
    ],
    extras_require={
        "test": ["pytest"],
    },
    entry_points={
        "console_scripts": [
            "power4=power4.interfaces.cli:main",
        ],
    },
)

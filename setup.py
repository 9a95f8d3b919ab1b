from setuptools import setup, find_packages

setup(
    name="connect4",
    version="0.1.0",
    packages=find_packages(exclude=["tests", "tests.*"]),
    python_requires=">=3.8",
    install_requires=[
        "numpy",
    ],
    extras_require={
        "test": ["pytest"],
    },
    entry_points={
        "console_scripts": [
            "connect4=connect4.interfaces.cli:main",
        ],
    },
)

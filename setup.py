# setup.py
from setuptools import setup, find_packages

setup(
    name="ledgerly",
    version="0.1.0",
    description="A small console ledger for personal income, expenses and monthly summaries",
    packages=find_packages(include=["ledger_tracker", "ledger_tracker.*"]),
    python_requires=">=3.8",
    install_requires=[
        "click>=7.0",
        "pyyaml>=5.3",
        "python-dotenv>=0.19",
    ],
    extras_require={
        "test": [
            "pytest>=7.0",
        ],
    },
    entry_points={
        "console_scripts": [
            "ledgerly=ledger_tracker.cli:main",
        ],
    },
    classifiers=[
        "Programming Language :: Python :: 3",
        "Operating System :: OS Independent",
    ],
)

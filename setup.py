"""Setup for SingleKey Python SDK."""

from setuptools import find_packages, setup

setup(
    name="singlekey-sdk",
    version="0.1.0",
    description="SingleKey Screening API Python SDK",
    packages=find_packages(include=["singlekey_sdk", "singlekey_sdk.*"]),
    install_requires=[
        "requests>=2.31.0",
        "pydantic>=2.5.0",
        "pydantic-settings>=2.1.0",
        "fastapi>=0.104.0",
    ],
    extras_require={
        "test": [
            "pytest>=7.4.0",
            "httpx>=0.25.0",
        ],
    },
    python_requires=">=3.11",
)

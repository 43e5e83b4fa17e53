"""Setup script for shelfctl."""

from setuptools import find_packages, setup

setup(
    name="shelfctl",
    version="0.1.0",
    description="Install, uninstall, start and stop Topshelf windows services from Python",
    python_requires=">=3.10",
    packages=find_packages(include=["shelfctl", "shelfctl.*"]),
    install_requires=[
        "click>=8.1",  # CLI
        "pydantic>=2.5",  # Settings and config models
        "pydantic-settings>=2.1",  # TOML/env configuration sources
        "dependency-injector>=4.41",  # Service container
        "tomli>=2.0; python_version < '3.11'",  # TOML parsing before tomllib
    ],
    extras_require={
        "test": [
            "pytest>=7.0",
        ],
    },
    entry_points={
        "console_scripts": [
            "shelfctl=shelfctl.__main__:main",
        ],
    },
)

"""
Setup script for critical-mind.

Critical Mind presents controversial topics as short, swipeable sections
and tracks what the reader engages with. It serves three roles:

1. Reader - Section-by-section reading with completion points
2. Explore - Recommendations ranked by category affinity
3. Insights - Levels, unlock progress and per-category completion

The 'critical-mind' command is the terminal entry point.
"""

from setuptools import find_packages, setup

setup(
    name="critical-mind",
    version="1.0.0",
    description="Topic ranking and progress engine for the Critical Mind learning app",
    long_description=open("README.md", encoding="utf-8").read() if __import__("os").path.exists("README.md") else "",
    long_description_content_type="text/markdown",
    author="Critical Mind",
    packages=find_packages(include=["src", "src.*"]),
    py_modules=["config"],
    package_data={"src.catalog": ["data/*.json"]},
    include_package_data=True,
    python_requires=">=3.10",
    install_requires=[
        # CLI
        "typer>=0.12.0",
        "rich>=13.0.0",
        # Config & Validation
        "pydantic>=2.0.0",
        "pydantic-settings>=2.0.0",
        # Logging
        "loguru>=0.7.0",
    ],
    extras_require={
        "dev": [
            "pytest>=7.0.0",
            "pytest-cov>=4.0.0",
            "ruff>=0.1.0",
            "mypy>=1.0.0",
        ],
    },
    entry_points={
        "console_scripts": [
            "critical-mind=src.cli.main:run",
        ],
    },
    classifiers=[
        "Development Status :: 4 - Beta",
        "Environment :: Console",
        "Intended Audience :: Education",
        "License :: OSI Approved :: MIT License",
        "Operating System :: OS Independent",
        "Programming Language :: Python :: 3",
        "Programming Language :: Python :: 3.10",
        "Programming Language :: Python :: 3.11",
        "Programming Language :: Python :: 3.12",
        "Topic :: Education",
    ],
    keywords="learning critical-thinking recommendations education cli",
)

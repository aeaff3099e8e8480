"""Setup configuration for toolcatalog."""

from setuptools import setup, find_packages

with open("README.md", "r", encoding="utf-8") as fh:
    long_description = fh.read()

setup(
    name="toolcatalog",
    version="0.1.0",
    description="Generate the catalog of supported static analysis report formats",
    long_description=long_description,
    long_description_content_type="text/markdown",
    packages=find_packages(include=["toolcatalog", "toolcatalog.*"]),
    classifiers=[
        "Programming Language :: Python :: 3",
        "Programming Language :: Python :: 3.9",
        "License :: OSI Approved :: MIT License",
        "Operating System :: OS Independent",
        "Development Status :: 3 - Alpha",
        "Intended Audience :: Developers",
        "Topic :: Software Development :: Documentation",
    ],
    python_requires=">=3.9",
    install_requires=[
        "click>=8.0",
        "rich>=13.0",
        "pyyaml>=6.0",
        "tzdata",
    ],
    extras_require={
        "test": ["pytest>=7.0"],
    },
    entry_points={
        "console_scripts": [
            "toolcatalog=toolcatalog.cli:cli",
        ],
    },
)

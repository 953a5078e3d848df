#!/usr/bin/env python3
"""
Setup configuration for GS1 Scan Decoder
"""

from setuptools import setup, find_packages

setup(
    name="lab-gs1-decoder",
    version="1.0.0",
    author="Lab Inventory Team",
    author_email="",
    description="GS1 Application Identifier decoder for scanned laboratory supplies",
    packages=find_packages(exclude=["tests", "tests.*", "docs", "examples", "scripts"]),
    python_requires=">=3.7",
    install_requires=[
        "python-dateutil>=2.8",
    ],
    extras_require={
        "dev": [
            "pytest>=7.0.0",
            "pytest-cov>=4.0.0",
        ],
    },
    entry_points={
        "console_scripts": [
            "gs1-scan=gs1_scan.__main__:main",
        ],
    },
    classifiers=[
        "Intended Audience :: Science/Research",
        "Intended Audience :: Developers",
        "Topic :: Software Development :: Libraries :: Python Modules",
        "Topic :: Scientific/Engineering",
        "License :: OSI Approved :: MIT License",
        "Programming Language :: Python :: 3",
        "Operating System :: OS Independent",
    ],
    keywords="gs1 barcode gtin sscc laboratory inventory decoder",
)

#!/usr/bin/env python
"""Setup configuration for Font Optimizer."""

from setuptools import find_packages, setup

setup(
    name="font-optimizer",
    version="0.1.0",
    description="Web font stylesheet inlining with metric override fallbacks",
    packages=find_packages(where="src"),
    package_dir={"": "src"},
    package_data={"font_optimizer": ["data/*.json"]},
    python_requires=">=3.11",
    install_requires=[
        "httpx>=0.25.0",
        "pydantic>=2.5.0",
        "pydantic-settings>=2.0.0",
        "structlog>=23.2.0",
        "click>=8.1.0",
    ],
    extras_require={
        "test": [
            "pytest>=7.4.3",
            "pytest-asyncio>=0.21.1",
        ]
    },
    entry_points={
        "console_scripts": [
            "font-optimizer=font_optimizer.cli:main",
        ],
    },
)

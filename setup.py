# pylint: disable=missing-module-docstring
# ruff: noqa

from pathlib import Path

from setuptools import find_packages, setup


def read_long_description() -> str:
    """Return README contents for PyPI description."""
    readme_path = Path(__file__).with_name("README.md")
    return readme_path.read_text(encoding="utf-8") if readme_path.exists() else "News Engine"


setup(
    name="news-engine",
    version="0.1.0",
    description="AI news article generation with SEO metadata",
    long_description=read_long_description(),
    long_description_content_type="text/markdown",
    python_requires=">=3.11",
    packages=find_packages(include=["news_engine", "news_engine.*"]),
    include_package_data=True,
    install_requires=[
        "pandas>=2.0",
        "httpx>=0.26",
        "pydantic>=2.5",
        "python-dotenv>=1.0",
        "fastapi>=0.110",
    ],
    extras_require={
        "test": ["pytest>=7.0"],
    },
    entry_points={
        "console_scripts": [
            "news-generate = news_engine.cli_entrypoints:generate",
            "news-generate-batch = news_engine.cli_entrypoints:generate_batch",
        ]
    },
    classifiers=[
        "Programming Language :: Python :: 3",
        "License :: OSI Approved :: MIT License",
        "Operating System :: OS Independent",
    ],
)

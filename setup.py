"""
Setup configuration for Privacy Filter library
"""
from setuptools import setup, find_packages
from pathlib import Path

# Read the README file
this_directory = Path(__file__).parent
long_description = (this_directory / "privacy_filter" / "README.md").read_text()

setup(
    name="privacy-filter",
    version="1.0.0",
    author="Privacy Filter Team",
    description="Detect, classify and redact sensitive information in text before it is posted publicly",
    long_description=long_description,
    long_description_content_type="text/markdown",
    packages=find_packages(exclude=["tests", "tests.*"]),
    classifiers=[
        "Development Status :: 4 - Beta",
        "Intended Audience :: Developers",
        "Topic :: Security",
        "Topic :: Text Processing",
        "License :: OSI Approved :: MIT License",
        "Programming Language :: Python :: 3",
        "Programming Language :: Python :: 3.8",
        "Programming Language :: Python :: 3.9",
        "Programming Language :: Python :: 3.10",
        "Programming Language :: Python :: 3.11",
        "Programming Language :: Python :: 3.12",
    ],
    python_requires=">=3.8",
    install_requires=[
        # Core dependencies (none required - all optional)
    ],
    extras_require={
        "ai": [
            "openai>=1.0.0",
        ],
        "dev": [
            "pytest>=7.0.0",
            "pytest-cov>=4.0.0",
            "black>=22.0.0",
            "flake8>=5.0.0",
            "mypy>=0.990",
        ],
    },
    entry_points={
        "console_scripts": [
            "privacy-filter=privacy_filter.cli:main",
        ],
    },
    keywords="privacy redaction pii social-media anonymization",
    include_package_data=True,
    zip_safe=False,
)

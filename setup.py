# (C) 2025 Rodrigo Rodrigues da Silva <rodrigopitanga@posteo.net>
# SPDX-License-Identifier: GPL-3.0-or-later

from setuptools import setup, find_packages
from pathlib import Path

here = Path(__file__).parent.resolve()

def read_long_description():
    for candidate in ("ABOUT.md", "PYPI_DESCRIPTION.md", "README.md"):
        path = here / candidate
        if path.exists():
            return path.read_text(encoding="utf-8"), "text/markdown"
    return "PatchLog — Changelog keeper driven by git tags and commit types.", "text/plain"

long_description, long_type = read_long_description()

setup(
    name="patchlog",                       # external name
    version="0.1.0",
    description="PatchLog — Changelog keeper driven by git tags and commit types.",
    long_description=long_description,
    long_description_content_type=long_type,
    author="Rodrigo Rodrigues da Silva",
    author_email="rodrigopitanga@posteo.net",
    license="GPL-3.0-or-later",
    python_requires=">=3.11",
    packages=find_packages(include=["palo", "palo.*"]),  # internal package
    include_package_data=True,
    install_requires=[
        "pydantic>=2.8.2",
        "pyyaml>=6.0.2",
        "python-dotenv>=1.0.1",
    ],
    extras_require={
        "test": ["pytest>=8.0"],
    },
    entry_points={
        "console_scripts": [
            "palo=palo.cli:main_cli",
        ],
    },
    classifiers=[
        "Development Status :: 4 - Beta",
        "Intended Audience :: Developers",
        "License :: OSI Approved :: GNU General Public License v3 or later (GPLv3+)",
        "Programming Language :: Python :: 3 :: Only",
        "Programming Language :: Python :: 3.11",
        "Programming Language :: Python :: 3.12",
        "Topic :: Software Development :: Version Control :: Git",
        "Topic :: Software Development :: Documentation",
    ],
    project_urls={
        "Homepage": "https://gitlab.com/pitanga/patchlog",
        "Source": "https://gitlab.com/pitanga/patchlog",
        "Tracker": "https://gitlab.com/pitanga/patchlog/issues",
    },
)

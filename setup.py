from pathlib import Path

from setuptools import setup, find_packages

# Single source for the version number
_version = {}
exec((Path(__file__).parent / "src" / "verbosity_flag" / "_version.py").read_text(), _version)

setup(
    name="verbosity-flag",
    version=_version["PIP_VERSION"],
    description="Control stdlib logging or loguru level with -v/--verbose and -q/--quiet flags",
    package_dir={"": "src"},
    packages=find_packages(where="src"),
    install_requires=[],
    extras_require={
        "loguru": [
            "loguru>=0.7",
        ],
        "dev": [
            "loguru>=0.7",
            "pytest>=7",
            "pytest-cov",
        ],
    },
    classifiers=[
        "Development Status :: 3 - Alpha",
        "Intended Audience :: Developers",
        "License :: OSI Approved :: MIT License",
        "Programming Language :: Python :: 3",
        "Programming Language :: Python :: 3.10",
        "Programming Language :: Python :: 3.11",
        "Programming Language :: Python :: 3.12",
    ],
    python_requires=">=3.10",
)

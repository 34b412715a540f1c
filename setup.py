from pathlib import Path
from setuptools import find_namespace_packages, setup

HERE = Path(__file__).parent


def _read_version() -> str:
    for line in (HERE / "src" / "concatener" / "__init__.py").read_text(encoding="utf-8").splitlines():
        if line.startswith("__version__"):
            return line.split("=", 1)[1].strip().strip("'\"")
    raise RuntimeError("__version__ not found in src/concatener/__init__.py")


setup(
    name="concatener",
    version=_read_version(),
    description="Concatenate files, directories and wildcard matches into one UTF-8 file",
    author="GAHEOS",
    python_requires=">=3.9",
    package_dir={"": "src"},
    packages=find_namespace_packages(where="src", include=["concatener", "concatener.*"]),
    install_requires=[],
    extras_require={"test": ["pytest>=7"]},
    entry_points={"console_scripts": ["concatener = concatener.cli:main"]},
)

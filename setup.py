from pathlib import Path
from setuptools import find_packages, setup


def _read_version() -> str:
    init = Path(__file__).parent / "src" / "gitrefs" / "__init__.py"
    for line in init.read_text(encoding="utf-8").splitlines():
        if line.startswith("__version__"):
            return line.split("=", 1)[1].strip().strip("'\"")
    raise RuntimeError("__version__ not found in src/gitrefs/__init__.py")


setup(
    name="gitrefs",
    version=_read_version(),
    description="Resolve branch, tag and commit references of remote Git repositories without cloning",
    author="GAHEOS",
    python_requires=">=3.9",
    package_dir={"": "src"},
    packages=find_packages("src"),
    install_requires=[
        "dulwich>=0.24",
        "paramiko>=3.0",
    ],
    extras_require={
        "test": ["pytest>=7"],
    },
    entry_points={
        "console_scripts": ["gitrefs=gitrefs.cli:main"],
    },
)

import pathlib
import re
import setuptools

path = pathlib.Path(__file__).absolute().parent


# Main metadata
name = "fracrating"
meta = path / "fracrating/common/meta.py"
version = str(re.search(rb'version = "(\S+)"', meta.read_bytes()).group(1), encoding="utf-8")


def requirements(filename: str):
    lines = (path / filename).read_text(encoding="utf-8").splitlines()
    return [line.strip() for line in lines if line.strip() and not line.startswith(("#", "-r"))]


# Actual build
setuptools.setup(
    name=name,
    version=version,
    description="Fractional rating widget for Dear ImGui",
    python_requires=">=3.11",
    packages=setuptools.find_namespace_packages(include=["fracrating", "fracrating.*"]),
    install_requires=requirements("requirements.txt"),
    extras_require={
        "test": requirements("requirements-dev.txt"),
    },
    entry_points={
        "console_scripts": [
            "fracrating = fracrating.main:_start",
        ],
    },
)

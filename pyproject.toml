[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "coquille"
version = "0.1.0"
description = "A minimal interactive shell with a small toolkit of string and I/O helpers"
requires-python = ">=3.10"
dependencies = []
keywords = ["shell", "repl", "command-line", "prompt"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Intended Audience :: Developers",
    "Operating System :: POSIX",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: System :: Shells",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
coquille = "coquille.shell:main"

[tool.hatch.build.targets.wheel]
packages = ["coquille"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "zonda_ide"
version = "0.1.0"
description = "Small command-line helpers for compiling, running and inspecting C/C++ exercises with shared makefiles"
requires-python = ">=3.10"
dependencies = []
keywords = ["make", "makefile", "compile", "run", "test-input", "cli"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: Developers",
    "Intended Audience :: Education",
    "Operating System :: POSIX",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Software Development :: Build Tools",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
compile = "zonda_ide.builder:main"
run = "zonda_ide.runner:main"
settings = "zonda_ide.settings:main"
char_ins = "zonda_ide.char_ins:main"
tfmanager = "zonda_ide.tfmanager:main"

[tool.hatch.build.targets.wheel]
packages = ["zonda_ide"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "dotx"
version = "0.1.0"
description = "A dotfile manager that tracks configuration files and deploys them as symlinks"
requires-python = ">=3.10"
dependencies = [
    "pyyaml",
]
keywords = ["dotfiles", "symlink", "configuration", "cli"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: End Users/Desktop",
    "Intended Audience :: System Administrators",
    "Operating System :: POSIX",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Utilities",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
dotx = "dotx.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["dotx"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "circlecore"
version = "1.0.0"
description = "Core desktop services: application lifecycle, configuration, settings, system information and device state managers"
requires-python = ">=3.10"
dependencies = [
    "platformdirs",
]
keywords = [
    "desktop",
    "session",
    "settings",
    "configuration",
    "system-info",
    "power",
    "audio",
    "network",
    "notifications",
    "signals",
]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Operating System :: POSIX :: Linux",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Desktop Environment",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
circlecore-info = "circlecore.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["circlecore"]

[tool.pytest.ini_options]
addopts = "-ra"
testpaths = ["tests"]

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true

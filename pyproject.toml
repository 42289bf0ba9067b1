[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "hospitalms"
version = "0.1.0"
description = "A small console hospital management system: accounts, rooms, schedules, inventory and bills."
requires-python = ">=3.10"
dependencies = []
keywords = ["hospital", "management", "inventory", "scheduling", "billing", "console"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Intended Audience :: End Users/Desktop",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Office/Business",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
hospitalms = "hospitalms.main_menu:main"

[tool.hatch.build.targets.wheel]
packages = ["hospitalms"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

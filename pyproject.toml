[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "drachenstudio"
version = "0.1.0"
description = "Manage the dragons, dragon flights and passengers of a film studio, stored as JSON"
requires-python = ">=3.10"
dependencies = []
keywords = ["dragons", "simulation", "json", "console"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: End Users/Desktop",
    "Natural Language :: German",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Games/Entertainment :: Simulation",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
drachenstudio = "drachenstudio.filmstudio:main"

[tool.hatch.build.targets.wheel]
packages = ["drachenstudio"]

[tool.pytest.ini_options]
addopts = "-ra"

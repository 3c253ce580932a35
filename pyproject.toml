[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "mistgate"
version = "0.1.0"
description = "A console text adventure: walk through rooms, make choices, fight monsters and dodge traps."
requires-python = ">=3.10"
dependencies = []
keywords = ["text adventure", "game", "rpg", "console", "interactive fiction"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Intended Audience :: End Users/Desktop",
    "Natural Language :: English",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Games/Entertainment :: Role-Playing",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
mistgate = "mistgate.game:main"

[tool.hatch.build.targets.wheel]
packages = ["mistgate"]

[tool.pytest.ini_options]
addopts = "-ra"

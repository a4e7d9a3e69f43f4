[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "sklep"
version = "0.1.0"
description = "A small desktop shopping list with a grocery shop, basket totals and text receipts"
requires-python = ">=3.10"
dependencies = []
keywords = ["shopping list", "groceries", "shop", "receipt", "tkinter"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: X11 Applications",
    "Intended Audience :: End Users/Desktop",
    "Natural Language :: Polish",
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
sklep = "sklep.gui:main"

[tool.hatch.build.targets.wheel]
packages = ["sklep"]

[tool.pytest.ini_options]
addopts = "-ra"

[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "ghupdate"
version = "0.0.1"
description = "Check a GitHub repository for its latest release and show its changelog."
requires-python = ">=3.10"
dependencies = []
keywords = ["update", "updater", "github", "releases", "changelog"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Environment :: X11 Applications",
    "Intended Audience :: End Users/Desktop",
    "Natural Language :: Chinese (Simplified)",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: System :: Software Distribution",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
ghupdate = "ghupdate.main:main"

[tool.hatch.build.targets.wheel]
packages = ["ghupdate"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

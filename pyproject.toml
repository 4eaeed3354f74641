[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "dockpanels"
version = "0.1.0"
description = "Lists, panels, focus handling and table cells for a terminal dashboard of Docker containers, services, images, volumes and networks"
requires-python = ">=3.10"
dependencies = []
keywords = ["docker", "tui", "terminal", "panels", "containers", "compose"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Software Development :: User Interfaces",
    "Typing :: Typed",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["dockpanels"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

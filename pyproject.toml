[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "aotsim"
version = "0.1.0"
description = "Frame-by-frame battle simulation for a base attack and defence strategy game"
requires-python = ">=3.10"
dependencies = []
keywords = ["game", "simulation", "strategy", "emp", "mines", "leaderboard"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Games/Entertainment :: Real Time Strategy",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["aotsim"]

[tool.pytest.ini_options]
addopts = "-ra"

[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "skibidicalc"
version = "1.0.0"
description = "A desktop calculator with overflow-checked arithmetic and a standard deviation tool"
requires-python = ">=3.10"
dependencies = []
keywords = ["calculator", "arithmetic", "factorial", "gcd", "root", "standard deviation", "tkinter"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: X11 Applications",
    "Environment :: Console",
    "Intended Audience :: End Users/Desktop",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Scientific/Engineering :: Mathematics",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
skibidicalc = "skibidicalc.gui:main"
skibidicalc-stddev = "skibidicalc.stddev:main"

[tool.hatch.build.targets.wheel]
packages = ["skibidicalc"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

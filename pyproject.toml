[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "pixelcircle"
version = "0.1.0"
description = "Count the pixels a circle covers, modulo k, with serial, partitioned and threaded strategies, plus device-report helpers."
requires-python = ">=3.10"
dependencies = []
keywords = ["circle", "pixels", "parallel", "partitioning", "threads", "device-query"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Education",
    "Intended Audience :: Science/Research",
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
pixelcircle = "pixelcircle.pixels:main"
pixelcircle-hello = "pixelcircle.hello:main"

[tool.hatch.build.targets.wheel]
packages = ["pixelcircle"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

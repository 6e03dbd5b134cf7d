[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "muonplots"
version = "0.1.0"
description = "Combine per-sample muon histograms and draw comparison plots of event selections"
requires-python = ">=3.10"
keywords = ["physics", "histogram", "muon", "plotting", "analysis"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Science/Research",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Scientific/Engineering :: Physics",
    "Topic :: Scientific/Engineering :: Visualization",
]
dependencies = [
    "matplotlib",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[tool.hatch.build.targets.wheel]
packages = ["muonplots"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

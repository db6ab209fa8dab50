[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "hdfskit"
version = "0.1.0"
description = "HDFS helpers: Hadoop configuration loading, client options, remote error mapping, summaries and command-line utilities"
requires-python = ">=3.10"
dependencies = []
keywords = ["hdfs", "hadoop", "filesystem", "namenode", "configuration"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Intended Audience :: System Administrators",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: System :: Filesystems",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["hdfskit"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"

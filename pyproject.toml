[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "gremlins"
version = "0.1.0"
description = "Mutation testing reports: mutant statuses, run summaries, threshold checks and JSON findings output"
requires-python = ">=3.10"
dependencies = []
keywords = ["mutation testing", "testing", "test efficacy", "coverage", "report"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Software Development :: Testing",
    "Topic :: Software Development :: Quality Assurance",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["gremlins"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "rec53"
version = "0.1.0"
description = "Building blocks for an iterative DNS resolver: zone walking, root hints, Happy Eyeballs upstream queries and NS warmup."
requires-python = ">=3.10"
dependencies = [
    "dnspython",
]
keywords = ["dns", "resolver", "iterative", "root-hints", "happy-eyeballs", "warmup"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Intended Audience :: System Administrators",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Internet :: Name Service (DNS)",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[tool.hatch.build.targets.wheel]
packages = ["rec53"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true

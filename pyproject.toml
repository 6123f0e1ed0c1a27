[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "galaxy42"
version = "0.1.0"
description = "Framed messaging, JSON control commands, peer references and IPv6 helpers for a galaxy42-style mesh network node"
requires-python = ">=3.10"
dependencies = []
keywords = [
    "networking",
    "mesh",
    "ipv6",
    "ndp",
    "peer-to-peer",
    "framing",
]
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
    "Topic :: System :: Networking",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["galaxy42"]

[tool.hatch.build.targets.sdist]
include = ["galaxy42", "tests", "pyproject.toml"]

[tool.pytest.ini_options]
addopts = "-ra"

[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "credhubcli"
version = "0.1.0"
description = "Command implementations for managing credentials, certificates and permissions on a CredHub server"
requires-python = ">=3.10"
dependencies = [
    "pyyaml",
]
keywords = [
    "credhub",
    "credentials",
    "secrets",
    "certificates",
    "permissions",
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
    "Topic :: Security",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[tool.hatch.build.targets.wheel]
packages = ["credhubcli"]

[tool.pytest.ini_options]
addopts = "-ra"
testpaths = ["tests"]

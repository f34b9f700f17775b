[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "auriga"
version = "0.1.9"
description = "State stores, grid layout, skills and a JSON-RPC tool server for coordinating coding agents"
requires-python = ">=3.10"
dependencies = []
keywords = ["agents", "mcp", "json-rpc", "layout", "file-tree"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Software Development",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["auriga"]

[tool.pytest.ini_options]
addopts = "-ra"

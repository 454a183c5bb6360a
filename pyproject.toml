[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "kvik"
version = "0.1.0"
description = "Publish/subscribe messaging building blocks for local networks of IoT clients, relays and gateways"
requires-python = ">=3.10"
dependencies = []
keywords = ["iot", "pubsub", "mqtt", "messaging", "gateway", "wildcard-trie"]
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
    "Topic :: Communications",
    "Topic :: Software Development :: Libraries :: Python Modules",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["kvik"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 88
target-version = "py310"

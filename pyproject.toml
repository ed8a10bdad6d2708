[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "liquibook"
version = "0.1.0"
description = "Order book building blocks: depth levels, order tracking, listener interfaces and a sample order generator"
requires-python = ">=3.10"
dependencies = []
keywords = ["order book", "trading", "market depth", "iceberg", "order tracking"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Intended Audience :: Financial and Insurance Industry",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Office/Business :: Financial :: Investment",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["liquibook"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

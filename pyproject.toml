[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "podrum"
version = "0.1.0"
description = "Building blocks for a Minecraft Bedrock server: binary streams, NBT, compression, JSON, base64, JWT payloads, commands and logging"
requires-python = ">=3.10"
dependencies = []
keywords = ["minecraft", "bedrock", "nbt", "binary-stream", "varint", "json", "jwt", "base64"]
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
    "Topic :: Games/Entertainment",
    "Topic :: Software Development :: Libraries :: Python Modules",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["podrum"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "yus"
version = "0.2.1"
description = "A single-page site server, server-rendered site pages, and the orbit-camera cube scene data behind its 3-D demo"
requires-python = ">=3.10"
dependencies = [
    "numpy",
]
keywords = ["spa", "static-site", "http-server", "orbit-camera", "webgpu", "matrices"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Web Environment",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Internet :: WWW/HTTP :: HTTP Servers",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
yus = "yus.server:main"

[tool.hatch.build.targets.wheel]
packages = ["yus"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

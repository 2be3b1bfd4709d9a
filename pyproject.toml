[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "totalfw"
version = "0.1.0"
description = "Core pieces of a Total.js-style web framework: configuration, statistics, path resolution and default handlers"
requires-python = ">=3.10"
dependencies = []
keywords = ["web", "framework", "totaljs", "paths", "configuration"]
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
    "Topic :: Internet :: WWW/HTTP :: Dynamic Content",
    "Topic :: Software Development :: Libraries :: Application Frameworks",
]

[project.optional-dependencies]
test = ["pytest", "pytest-asyncio"]

[project.scripts]
totalfw = "totalfw.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["totalfw"]

[tool.pytest.ini_options]
addopts = "-ra"

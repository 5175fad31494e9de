[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "mmo-realm"
version = "0.1.0"
description = "In-memory game-server state and rules for a small online role-playing world: accounts, sessions, players, chat and client-side request validation."
requires-python = ">=3.10"
dependencies = []
keywords = ["mmo", "game-server", "multiplayer", "rpc", "chat", "role-playing"]
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
    "Topic :: Games/Entertainment :: Role-Playing",
    "Topic :: Software Development :: Libraries :: Python Modules",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["mmo_realm"]

[tool.hatch.build.targets.sdist]
include = ["mmo_realm", "tests", "README.md"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.ruff.lint]
select = ["E", "F", "W", "I", "B", "UP"]

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
warn_redundant_casts = true

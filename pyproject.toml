[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "mcdata"
version = "0.1.0"
description = "Typed, read-only access to Minecraft game data files: items, blocks, biomes, entities, foods, enchantments, loot, recipes and versions"
requires-python = ">=3.10"
dependencies = []
keywords = ["minecraft", "game-data", "items", "blocks", "recipes", "biomes"]
classifiers = [
    "Development Status :: 4 - Beta",
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
packages = ["mcdata"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"

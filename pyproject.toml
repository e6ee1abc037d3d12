[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "chainkit"
version = "0.1.0"
description = "Hashing primitives, an orphan block pool and logging helpers for a blockchain node"
requires-python = ">=3.10"
keywords = ["blockchain", "hashing", "blake2b", "sha256", "ripemd160", "orphan blocks"]
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
    "Topic :: Security :: Cryptography",
    "Topic :: Software Development :: Libraries :: Python Modules",
]
dependencies = [
    "pycryptodome",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
chainkit-node = "chainkit.node:main"

[tool.hatch.build.targets.wheel]
packages = ["chainkit"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true

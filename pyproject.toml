[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "judgesolutions"
version = "0.1.0"
description = "Solutions to classic online-judge problems: build-order scheduling, warp counting and longest common subsequence"
requires-python = ">=3.10"
keywords = ["algorithms", "dynamic-programming", "competitive-programming", "lcs", "scheduling"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Education",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Education",
]
dependencies = []

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
acmcraft = "judgesolutions.acmcraft:main"
alpha-centauri = "judgesolutions.alpha_centauri:main"
lcs-length = "judgesolutions.lcs:main"

[tool.hatch.build.targets.wheel]
packages = ["judgesolutions"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 88
target-version = "py310"

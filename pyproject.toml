[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "tfproviderdocs"
version = "0.11.1"
description = "Checks Terraform Provider documentation directories and files against Terraform Registry conventions"
requires-python = ">=3.10"
keywords = ["terraform", "provider", "documentation", "lint", "registry", "markdown"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Software Development :: Documentation",
    "Topic :: Software Development :: Quality Assurance",
]
dependencies = [
    "markdown-it-py>=2.2",
    "pyyaml>=6.0",
]

[project.optional-dependencies]
test = [
    "pytest>=7.0",
]

[project.scripts]
tfproviderdocs = "tfproviderdocs.command.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["tfproviderdocs"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true

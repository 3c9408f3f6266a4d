[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "userdemo"
version = "0.1.0"
description = "A small Flask web service that validates and stores users and answers in a uniform result envelope"
requires-python = ">=3.10"
keywords = ["flask", "sqlalchemy", "web", "rest", "example", "users", "validation"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Web Environment",
    "Framework :: Flask",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Internet :: WWW/HTTP :: Dynamic Content",
]
dependencies = [
    "flask",
    "sqlalchemy",
    "pyyaml",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
userdemo = "userdemo.app:main"

[tool.hatch.build.targets.wheel]
packages = ["userdemo"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
ignore_missing_imports = true

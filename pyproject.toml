[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "fcodeshop"
version = "0.1.0"
description = "A small terminal marketplace for buyers and sellers, backed by plain text files."
requires-python = ">=3.10"
keywords = ["e-commerce", "shop", "cart", "terminal", "point-of-sale"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Intended Audience :: End Users/Desktop",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Office/Business :: Financial :: Point-Of-Sale",
]
dependencies = []

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
fcodeshop = "fcodeshop.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["fcodeshop"]

[tool.pytest.ini_options]
addopts = "-ra"

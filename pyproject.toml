[build-system]
requires = ["setuptools>=64"]
build-backend = "setuptools.build_meta"

[project]
name = "bancomat"
version = "0.1.0"
description = "A small cash-machine simulator: a banknote stock, greedy withdrawals and an ordered transaction log"
requires-python = ">=3.10"
dependencies = []
keywords = ["atm", "banknotes", "multiset", "sorted-set", "console"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: Education",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Office/Business :: Financial",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
bancomat = "bancomat.console:main"

[tool.setuptools.packages.find]
include = ["bancomat*"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

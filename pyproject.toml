[build-system]
requires = ["hatchling>=1.18"]
build-backend = "hatchling.build"

[project]
name = "oslabsim"
version = "0.1.0"
description = "Small simulations of classic operating-system topics: page replacement, disk scheduling, synchronisation and process demos."
requires-python = ">=3.10"
dependencies = []
keywords = [
    "operating systems",
    "page replacement",
    "disk scheduling",
    "synchronization",
    "producer consumer",
    "sleeping barber",
    "cigarette smokers",
    "education",
]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Education",
    "Intended Audience :: Developers",
    "Operating System :: POSIX",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Education",
    "Topic :: System :: Operating System",
]

[project.optional-dependencies]
test = ["pytest>=7"]

[project.scripts]
oslab-paging = "oslabsim.paging:main"
oslab-disk = "oslabsim.disk:main"
oslab-counters = "oslabsim.counters:main"
oslab-problems = "oslabsim.problems:main"
oslab-ipc-producer = "oslabsim.ipc:producer_main"
oslab-ipc-consumer = "oslabsim.ipc:consumer_main"
oslab-processes = "oslabsim.processes:main"

[tool.hatch.build.targets.wheel]
packages = ["oslabsim"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 88
target-version = "py310"

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true

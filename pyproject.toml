[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "chipvm"
version = "0.1.0"
description = "A CHIP-8 virtual machine: memory, CPU, display, keypad and timers"
requires-python = ">=3.10"
dependencies = []
keywords = ["chip-8", "chip8", "emulator", "virtual machine", "interpreter"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: System :: Emulators",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["chipvm"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

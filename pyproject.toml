[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "uartboot"
version = "0.1.0"
description = "Stream a firmware image to a microcontroller bootloader over a serial port"
requires-python = ">=3.10"
keywords = ["uart", "serial", "bootloader", "firmware", "stm32"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Software Development :: Embedded Systems",
]
dependencies = [
    "pyserial",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
uartboot = "uartboot.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["uartboot"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "ohmscope"
version = "0.1.0"
description = "Voltage-divider ohmmeter logic: E24 matching, colour bands, OLED frame buffer and LED matrix frames"
requires-python = ">=3.10"
dependencies = []
keywords = ["ohmmeter", "resistor", "e24", "color code", "ssd1306", "ws2812", "adc"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Education",
    "Intended Audience :: Science/Research",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Scientific/Engineering :: Electronic Design Automation (EDA)",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
ohmscope = "ohmscope.app:main"

[tool.hatch.build.targets.wheel]
packages = ["ohmscope"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

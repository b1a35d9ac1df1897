[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "eipscanner"
version = "0.1.0"
description = "EtherNet/IP encapsulation, common packet format, CIP data encoding and socket primitives for talking to industrial devices"
requires-python = ">=3.10"
dependencies = []
keywords = ["ethernet/ip", "eip", "cip", "industrial", "plc", "fieldbus"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Intended Audience :: Manufacturing",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Software Development :: Embedded Systems",
    "Topic :: System :: Networking",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["eipscanner"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

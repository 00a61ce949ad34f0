[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "diffbot-sim"
version = "0.1.0"
description = "Discrete-time simulation of a differential-drive robot following a trapezoidal trajectory under a linearising PID controller"
requires-python = ">=3.10"
dependencies = []
keywords = ["robotics", "simulation", "differential drive", "pid", "trajectory", "control"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Education",
    "Intended Audience :: Science/Research",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Scientific/Engineering",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
diffbot-sim = "diffbot_sim.simulation:main"

[tool.hatch.build.targets.wheel]
packages = ["diffbot_sim"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

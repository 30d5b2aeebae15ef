[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "statwm"
version = "1.0.0"
description = "System status components and a display-independent tiling window manager model"
requires-python = ">=3.10"
dependencies = [
    "psutil",
]
keywords = ["status", "statusbar", "system-monitoring", "window-manager", "tiling"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Intended Audience :: End Users/Desktop",
    "Operating System :: POSIX :: Linux",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Desktop Environment :: Window Managers",
    "Topic :: System :: Monitoring",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[tool.hatch.build.targets.wheel]
packages = ["statwm"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 88
target-version = "py310"

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true

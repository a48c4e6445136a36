[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "wmkit"
version = "1.0.0"
description = "Status-line readings and tiling layout geometry for minimal window-manager setups"
requires-python = ">=3.10"
dependencies = [
    "psutil",
]
keywords = ["status bar", "window manager", "tiling", "layouts", "monitoring"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Environment :: X11 Applications",
    "Intended Audience :: End Users/Desktop",
    "Operating System :: POSIX :: Linux",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: System :: Monitoring",
    "Topic :: Desktop Environment :: Window Managers",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
wmstatus = "wmkit.status:main"

[tool.hatch.build.targets.wheel]
packages = ["wmkit"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

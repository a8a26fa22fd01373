[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "tilewm"
version = "0.1.0"
description = "Tiling window manager logic: layouts, size hints, tags, rules, status codes and a file tester"
requires-python = ">=3.10"
dependencies = []
keywords = ["window-manager", "tiling", "layouts", "status-bar", "file-test"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Intended Audience :: Developers",
    "Intended Audience :: End Users/Desktop",
    "Operating System :: POSIX",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Desktop Environment :: Window Managers",
    "Topic :: Utilities",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
tilewm-stest = "tilewm.stest:main"

[tool.hatch.build.targets.wheel]
packages = ["tilewm"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.ruff.lint]
select = ["E", "F", "W", "I", "B", "UP"]

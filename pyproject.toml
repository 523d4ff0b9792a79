[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "designdemos"
version = "0.1.0"
description = "Small ride-sharing and marketplace models that show object-oriented design patterns"
requires-python = ">=3.10"
dependencies = []
keywords = [
    "design-patterns",
    "strategy",
    "factory",
    "singleton",
    "ride-sharing",
    "marketplace",
]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Education",
    "Intended Audience :: Developers",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Office/Business",
    "Topic :: Education",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
designdemos-simple-rides = "designdemos.simple_rides:main"
designdemos-rides = "designdemos.rides:main"
designdemos-bazaar = "designdemos.bazaar:main"

[tool.hatch.build.targets.wheel]
packages = ["designdemos"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

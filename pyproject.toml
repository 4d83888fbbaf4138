[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "dnszone"
version = "0.2.0"
description = "Building blocks for parsing DNS zone files in presentation format"
requires-python = ">=3.10"
dependencies = []
keywords = ["dns", "zone", "zonefile", "master file", "presentation format", "scanner"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Intended Audience :: System Administrators",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Internet :: Name Service (DNS)",
    "Topic :: Software Development :: Libraries :: Python Modules",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
dnszone-perfecthash = "dnszone.perfecthash:main"

[tool.hatch.build.targets.wheel]
packages = ["dnszone"]

[tool.pytest.ini_options]
addopts = "-ra"

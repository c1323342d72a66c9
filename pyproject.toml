[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "grpcmon"
version = "0.1.0"
description = "Tools for inspecting, shaping, aggregating and pacing the replay of captured gRPC calls"
requires-python = ">=3.10"
dependencies = []
keywords = ["grpc", "monitoring", "capture", "replay", "metrics", "sampling"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: System :: Networking :: Monitoring",
    "Topic :: Software Development :: Libraries :: Python Modules",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["grpcmon"]

[tool.pytest.ini_options]
addopts = "-ra"

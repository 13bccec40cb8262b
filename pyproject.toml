[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "materialcolor"
version = "0.1.0"
description = "Color science utilities: sRGB and L*a*b* conversions and image color quantization (Wu, weighted k-means, Celebi)."
requires-python = ">=3.10"
dependencies = []
keywords = ["color", "quantization", "lab", "srgb", "palette", "k-means", "wu"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Multimedia :: Graphics",
    "Topic :: Software Development :: Libraries :: Python Modules",
]

[project.optional-dependencies]
test = ["pytest", "hypothesis"]

[tool.hatch.build.targets.wheel]
packages = ["materialcolor"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 88
target-version = "py310"

[tool.mypy]
python_version = "3.10"

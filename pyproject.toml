[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "perceptual_hash"
version = "3.2.0"
description = "Perceptual hashing and difference calculation for images."
requires-python = ">=3.10"
keywords = ["image", "hash", "perceptual", "difference", "blockhash", "dct", "hamming"]
classifiers = [
    "Development Status :: 5 - Production/Stable",
    "Intended Audience :: Developers",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Multimedia :: Graphics",
    "Topic :: Scientific/Engineering :: Image Processing",
]
dependencies = [
    "numpy",
    "pillow",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
hash-image = "perceptual_hash.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["perceptual_hash"]

[tool.pytest.ini_options]
addopts = "-ra"

[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "desafiocrack"
version = "0.1.0"
description = "Recover text hidden with XOR, bit rotation and RLE or LZ78 compression, using a known hint"
requires-python = ">=3.10"
dependencies = []
keywords = ["xor", "bit-rotation", "rle", "lz78", "decompression", "known-plaintext", "cryptanalysis"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: Education",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Security :: Cryptography",
    "Topic :: System :: Archiving :: Compression",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
desafiocrack = "desafiocrack.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["desafiocrack"]

[tool.pytest.ini_options]
addopts = "-ra"
testpaths = ["tests"]

[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "softraster"
version = "0.1.0"
description = "A small software rasterizer: matrices, meshes, clipping, lighting and depth-buffered triangle drawing onto an RGBA canvas."
requires-python = ">=3.10"
dependencies = []
keywords = ["rasterizer", "3d", "rendering", "graphics", "software-rendering", "clipping", "lighting"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Intended Audience :: Education",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Multimedia :: Graphics :: 3D Rendering",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["softraster"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

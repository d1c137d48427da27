[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "rtrace"
version = "0.1.0"
description = "A small ray tracer with spheres, planes, cubes, cylinders, cones, triangles, groups, patterns and OBJ loading"
requires-python = ">=3.10"
dependencies = [
    "numpy",
    "pillow",
]
keywords = ["ray tracing", "rendering", "graphics", "3d", "obj", "phong"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Intended Audience :: Education",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Multimedia :: Graphics :: 3D Rendering",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
rtrace-demo = "rtrace.demos:main"

[tool.hatch.build.targets.wheel]
packages = ["rtrace"]

[tool.pytest.ini_options]
addopts = "-ra"

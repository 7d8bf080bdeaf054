[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "nietzsche"
version = "0.1.0"
description = "Image and PDF processing toolkit with a small HTTP upload service"
requires-python = ">=3.10"
keywords = ["image", "pdf", "watermark", "resize", "pdfa", "ocr", "conversion", "upload"]
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
    "Topic :: Multimedia :: Graphics :: Graphics Conversion",
    "Topic :: Internet :: WWW/HTTP :: WSGI :: Application",
]
dependencies = [
    "pillow",
    "flask",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
nietzsche-api = "nietzsche.api:main"

[tool.hatch.build.targets.wheel]
packages = ["nietzsche"]

[tool.pytest.ini_options]
addopts = "-ra"
testpaths = ["tests"]

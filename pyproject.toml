[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "examplekit"
version = "0.1.0"
description = "Small, self-contained programming examples: algorithms, data formats, cryptography, images and network services."
requires-python = ">=3.10"
keywords = [
    "examples",
    "algorithms",
    "education",
    "csv",
    "json",
    "xml",
    "cryptography",
    "mandelbrot",
    "http",
    "sqlite",
]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Education",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Education",
]
dependencies = [
    "cryptography",
    "pillow",
    "jinja2",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
examplekit-isbn = "examplekit.isbn:main"
examplekit-primes = "examplekit.parallel:main"
examplekit-double = "examplekit.apiclient:main"
examplekit-notes = "examplekit.notes:main"
examplekit-pi = "examplekit.pi:main"
examplekit-httpd = "examplekit.webapps:main"
examplekit-booking = "examplekit.booking:main"

[tool.hatch.build.targets.wheel]
packages = ["examplekit"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.ruff.lint]
select = ["E", "F", "W", "I", "B", "UP"]

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
warn_redundant_casts = true

"""Small, self-contained examples: algorithms, data formats, cryptography, images and services."""

__version__ = "0.1.0"
"""Code generation module for class API components."""

from .class_generator import ClassGenerator
from .import_generator import ImportGenerator

__all__ = ["ClassGenerator", "ImportGenerator"]

"""Core building blocks of a small game engine: identifiers, strings, allocators, containers, math, reflection, paths and profiling."""

__version__ = "0.1.0"
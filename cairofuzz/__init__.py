"""Mutation-based fuzzer for Sierra programs, run through a pluggable executor."""

__version__ = "0.1.0"

__all__ = ["__version__"]
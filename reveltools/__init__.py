"""Containers, thread-based concurrency helpers and probability distributions."""

__version__ = "0.1.0"
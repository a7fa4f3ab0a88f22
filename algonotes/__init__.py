"""Readable implementations of classic algorithms and data structures: arrays,
searching, string and number exercises, recursion traces, linked lists,
matrices and polynomials."""

__version__ = "0.1.0"
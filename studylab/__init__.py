"""Classic data structures, number exercises, student records and small console games."""

__version__ = "0.1.0"
"""Two-stack integer sorting that reports the stack operations it uses, with small text and byte helpers."""

__version__ = "1.0.0"
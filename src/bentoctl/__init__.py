"""bentoctl — bento layout validation for linked content entries."""

__version__ = "0.1.0"

"""State Compare backend: Gemini-powered comparison of two state profiles."""

__version__ = "0.1.0"

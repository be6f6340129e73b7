"""Classic grid Snake built on pygame."""

__version__ = "0.1.0"

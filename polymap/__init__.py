"""polymap - provider-agnostic interactive maps."""

__version__ = "0.1.0"

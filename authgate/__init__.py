"""Credential-based registration, login and welcome page service."""

__version__ = "0.1.0"

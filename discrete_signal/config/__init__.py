"""
Config Module
=============

Logging setup shared by the command-line entry point and the examples.
"""

from .logging_config import setup_logging

__all__ = ["setup_logging"]

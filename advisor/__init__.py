"""
Advisor CLI.

Command-line client for managing named advisor service instances.
"""

__version__ = "0.1.0"

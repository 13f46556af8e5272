"""
                Restaurant Ordering API

A small REST backend for a restaurant ordering application,
serving dishes and orders from an in-memory store.

Version: 1.0.0
License: MIT
"""

__version__ = "1.0.0"

"""
HRMS Employee Service
=====================

Minimal employee records API over a MongoDB collection.
"""

__version__ = "1.0.0"

"""
Infrastructure Layer
====================

Concrete adapters for external systems (MongoDB).
"""

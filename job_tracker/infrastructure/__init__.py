"""
Infrastructure Layer
====================

Concrete implementations of domain repository interfaces (MongoDB).
"""

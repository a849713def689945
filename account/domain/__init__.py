"""
Domain package.

Holds the framework-free error contract shared by every layer.
"""

"""
Shared error handling package.

Centralizes error-to-HTTP mapping so that service errors
are consistently translated into negotiated API responses.
"""

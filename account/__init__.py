"""
Account service transport layer.

Application package root. Holds the HTTP content negotiation
used by the account service: body decoder and response encoder
selection from request headers, and error response formatting.

Layers:
    - domain: Error contract (classified vs. unclassified errors).
    - interfaces: FastAPI routers, Pydantic schemas.
    - shared: Cross-cutting concerns (transport codecs, errors, logging, limits).
"""

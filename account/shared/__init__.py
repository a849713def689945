"""
Shared module package.

Contains cross-cutting concerns used by the service:
- Content negotiation (codecs, decoder/encoder selection)
- Error handling and mapping
- Request size limiting
- Logging configuration
"""

"""HTTP interface package: routers and request/response schemas."""

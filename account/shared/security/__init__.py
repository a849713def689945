"""Request guards applied as Starlette middleware."""

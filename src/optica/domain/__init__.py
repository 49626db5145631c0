"""Domain layer — optics, optional values, and validation.

This layer depends only on the stdlib. Every value it defines is immutable
and every operation is pure. It must never import from services, config,
output, or commands.
"""

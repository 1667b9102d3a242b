"""Domain layer: schema specs, validation, operation descriptors, encoding.

This layer depends only on the stdlib.
It must never import from services, infrastructure, commands, or config.
"""

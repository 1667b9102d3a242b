"""Infrastructure layer: template loading.

It must never import from domain, services, commands, or output.
"""

"""Service layer: dispatch, synthesis and static resources returning ServiceResult.

Services may import from domain, catalog and infrastructure.
They must never import from commands, output, or mcp.
"""

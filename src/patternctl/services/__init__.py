"""Service layer: runs the pattern demos and returns ServiceResult.

Services may import from domain, creational, behavioral, and config.
They must never import from commands or output.
"""

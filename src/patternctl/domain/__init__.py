"""Domain layer: closed enumerations shared by the pattern modules.

This layer depends only on stdlib.
It must never import from services, output, commands, or config.
"""

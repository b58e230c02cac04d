"""Domain layer — precision primitives, zone conversion, year navigation.

This layer depends only on stdlib.
It must never import from services or config.
"""

"""Service layer: use cases returning ServiceResult.

Services may import from domain and adapters layers.
They must never import from commands or output.
"""

"""Service layer — boundary lookups returning ServiceResult.

Services may import from domain and config layers.
"""

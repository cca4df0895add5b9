"""Service layer — noid operations returning ServiceResult.

Services may import from domain and config models.
They must never import from commands or output.
"""

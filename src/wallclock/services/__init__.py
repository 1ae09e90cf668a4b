"""Service layer — time operations returning ServiceResult.

Services may import from the domain layer only.
They must never import from commands, output, config, or plugins.
"""

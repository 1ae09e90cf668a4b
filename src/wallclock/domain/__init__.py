"""Domain layer — the time-of-day value type, its fields, units, and codec.

This layer depends only on stdlib.
It must never import from services, config, output, commands, or plugins.
"""

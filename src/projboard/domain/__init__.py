"""Domain layer — project model, status enum, validation rules, drag payloads.

This layer depends only on stdlib and pydantic.
It must never import from services, infrastructure, commands, or config.
"""

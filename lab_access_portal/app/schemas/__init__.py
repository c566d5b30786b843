"""
Pydantic schema definitions for API payloads and the stored entity.

Schemas keep the JSON representation (camelCase keys) separate from
the snake_case attribute names used throughout the services.
"""

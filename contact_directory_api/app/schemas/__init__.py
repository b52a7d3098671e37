"""
Pydantic schema definitions for API payloads.

Schemas are shared by the store (which keeps ``Contact`` instances)
and the HTTP layer (which decodes ``ContactCreate`` bodies).
"""

"""
Pydantic schema definitions for API payloads.

Schemas are kept separate from the stored MongoDB documents so that the
JSON representation (``id`` as a hex string) is decoupled from
persistence (``_id`` as an ``ObjectId``).
"""

"""
Pydantic schema definitions for API payloads.

Every operation has a request model (what the dispatcher decodes the
body into) and a response model (what it encodes back).
"""

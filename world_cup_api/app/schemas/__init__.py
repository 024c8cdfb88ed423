"""
Pydantic schema definitions for API payloads.

The same models describe the request body of ``POST /winners``, the
response of ``GET /winners`` and the layout of the JSON data file.
"""

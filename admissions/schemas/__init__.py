"""API request/response schemas (pydantic). Presentation layer only."""

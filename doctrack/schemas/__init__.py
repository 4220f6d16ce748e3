"""API request/response schemas (pydantic). Responses use the success envelope in common."""

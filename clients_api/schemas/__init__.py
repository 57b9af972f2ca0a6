"""
Pydantic models describing the client payloads accepted and returned by the API.
"""

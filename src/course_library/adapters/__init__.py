"""Adapters – FastAPI integration and in-memory storage."""

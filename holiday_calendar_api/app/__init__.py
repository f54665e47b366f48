"""FastAPI application package for the Holiday Calendar API."""

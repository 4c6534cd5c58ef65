"""
API layer for the resource services.

Exposes /health and the CRUD endpoints for devices, sessions and viewers.
"""

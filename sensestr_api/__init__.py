"""
Sensestr resource API: devices, sessions and viewers.

This package contains the FastAPI app entry point (main.py), the CRUD
routes for devices, sessions and viewers, the ownership policy and
lifecycle use cases, and infrastructure (MongoDB, event API socket).
"""

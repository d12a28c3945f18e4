"""
Service layer for business logic.

This layer keeps the epic/story consistency rules apart from how the
database is stored, so backends can be swapped and tested in isolation.
"""

"""
Services module - repositories and the shared CRUD operations.
"""

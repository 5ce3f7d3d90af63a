"""
Student Management API
CRUD REST service for students, enrollments and subjects.

Architecture:
- MongoDB: one collection per entity, plus users for auth
- FastAPI: routes -> validation -> repositories
- JWT: stateless bearer-token guard on every entity route
"""

__version__ = "1.0.0"

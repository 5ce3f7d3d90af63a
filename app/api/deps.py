"""
FastAPI dependencies - repositories built over the app's database.

Tests swap the database by handing create_app() a mongomock client, or
override any of these with app.dependency_overrides.
"""

from fastapi import Depends
from pymongo.database import Database

from app.db.mongodb import get_db
from app.services.repository import (
    EnrollmentRepository,
    StudentRepository,
    SubjectRepository,
    UserRepository,
)


def get_student_repository(db: Database = Depends(get_db)) -> StudentRepository:
    return StudentRepository(db)


def get_enrollment_repository(db: Database = Depends(get_db)) -> EnrollmentRepository:
    return EnrollmentRepository(db)


def get_subject_repository(db: Database = Depends(get_db)) -> SubjectRepository:
    return SubjectRepository(db)


def get_user_repository(db: Database = Depends(get_db)) -> UserRepository:
    return UserRepository(db)

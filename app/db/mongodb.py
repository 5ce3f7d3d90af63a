"""
MongoDB Connection Utility

MongoDB stores every entity as a self-contained document:
- students
- enrollments
- subjects
- users (auth credentials, bcrypt hashes only)

The client is created once per application (see app.main.create_app) and
kept on app.state; request handlers reach it through the get_db dependency
rather than a module-level global, so tests can hand in a mongomock client.
"""
import logging

from fastapi import Request
from pymongo import ASCENDING, MongoClient
from pymongo.database import Database

from app.core.config import Settings

logger = logging.getLogger(__name__)


# Collection name constants (avoid typos)
COLLECTIONS = {
    "students": "students",
    "enrollments": "enrollments",
    "subjects": "subjects",
    "users": "users",
}


def create_mongo_client(settings: Settings) -> MongoClient:
    """
    Build a MongoClient. Connection is lazy: nothing is contacted until the
    first operation, so this never fails on an unreachable server.
    """
    return MongoClient(
        settings.mongodb_uri,
        serverSelectionTimeoutMS=settings.mongodb_timeout_ms,
    )


def get_db(request: Request) -> Database:
    """FastAPI dependency - the database bound to this app."""
    return request.app.state.db


def test_mongo_connection(db: Database) -> bool:
    """
    Test if MongoDB is reachable.
    Returns True if connection successful, False otherwise.
    """
    try:
        # ping command checks connection
        db.command("ping")
        return True
    except Exception as e:
        logger.warning("MongoDB connection failed: %s", e)
        return False


def init_mongo_indexes(db: Database) -> None:
    """
    Create indexes, including the unique ones that back conflict detection.
    Call this once during app startup.
    """
    students = db[COLLECTIONS["students"]]
    students.create_index("Student_ID", unique=True)
    students.create_index("Email", unique=True)
    students.create_index([("createdAt", ASCENDING), ("_id", ASCENDING)])

    enrollments = db[COLLECTIONS["enrollments"]]
    enrollments.create_index("Enrollment_ID", unique=True)
    # One enrollment per student per course
    enrollments.create_index([
        ("Student_ID", ASCENDING),
        ("Course_ID", ASCENDING)
    ], unique=True)
    enrollments.create_index([("createdAt", ASCENDING), ("_id", ASCENDING)])

    subjects = db[COLLECTIONS["subjects"]]
    subjects.create_index("Subject_ID", unique=True)
    subjects.create_index([("createdAt", ASCENDING), ("_id", ASCENDING)])

    db[COLLECTIONS["users"]].create_index("username", unique=True)

    logger.info("MongoDB indexes created successfully")

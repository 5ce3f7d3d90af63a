"""
MongoDB Repositories - persistence for each entity collection.

Collections:
1. students     - Student records, keyed by Student_ID
2. enrollments  - Enrollment records, keyed by Enrollment_ID
3. subjects     - Subject records, keyed by Subject_ID
4. users        - Auth credentials (username + bcrypt hash)

Repositories are thin: they translate paging and lookups into pymongo calls
and documents into JSON-serializable dicts. No caching, retries or
transactions - single-document operations are atomic in MongoDB.
"""

from datetime import datetime, timezone
from typing import Dict, List, Optional, Tuple
from bson import ObjectId
from pymongo import ASCENDING, ReturnDocument
from pymongo.collection import Collection
from pymongo.database import Database

from app.db.mongodb import COLLECTIONS


# ============================================================
# HELPER: Convert ObjectId to string for JSON serialization
# ============================================================

def serialize_doc(doc: dict) -> dict:
    """Convert MongoDB document to JSON-serializable dict."""
    if doc is None:
        return None
    if "_id" in doc:
        doc["_id"] = str(doc["_id"])
    return doc


def serialize_docs(docs: list) -> list:
    """Convert list of MongoDB documents to JSON-serializable list."""
    return [serialize_doc(doc) for doc in docs]


# Insertion order; _id breaks ties between documents created in the same millisecond
INSERTION_ORDER = [("createdAt", ASCENDING), ("_id", ASCENDING)]


# ============================================================
# BASE REPOSITORY
# ============================================================

class MongoRepository:
    """
    CRUD over one collection, addressed by a business identifier field.

    Subclasses set:
        collection_name: key into COLLECTIONS
        id_field: the identifier used in /:id routes
        entity_name: used in conflict / not-found messages
        unique_keys: [(fields, conflict message)] - each tuple of fields is
            backed by a unique index (see init_mongo_indexes)
    """

    collection_name: str = ""
    id_field: str = ""
    entity_name: str = "Resource"
    unique_keys: List[Tuple[Tuple[str, ...], str]] = []

    def __init__(self, db: Database):
        self.collection: Collection = db[COLLECTIONS[self.collection_name]]

    def insert(self, fields: dict) -> dict:
        """
        Insert a validated document, stamping createdAt/updatedAt.

        Returns:
            The stored document, read back so it matches later reads exactly
        """
        now = datetime.now(timezone.utc)
        doc = {**fields, "createdAt": now, "updatedAt": now}
        result = self.collection.insert_one(doc)
        return serialize_doc(self.collection.find_one({"_id": result.inserted_id}))

    def find_by_id(self, entity_id: int) -> Optional[dict]:
        doc = self.collection.find_one({self.id_field: entity_id})
        return serialize_doc(doc)

    def exists(self, query: dict, exclude: Optional[str] = None) -> bool:
        """True if a document matches `query`, ignoring the one whose _id is `exclude`."""
        if exclude is not None:
            query = {**query, "_id": {"$ne": ObjectId(exclude)}}
        return self.collection.find_one(query, projection={"_id": 1}) is not None

    def count(self) -> int:
        return self.collection.count_documents({})

    def find_page(self, skip: int, limit: int) -> List[dict]:
        cursor = self.collection.find().sort(INSERTION_ORDER).skip(skip).limit(limit)
        return serialize_docs(list(cursor))

    def update(self, entity_id: int, fields: dict) -> Optional[dict]:
        """Set the given fields. Returns the updated document, or None if absent."""
        doc = self.collection.find_one_and_update(
            {self.id_field: entity_id},
            {"$set": {**fields, "updatedAt": datetime.now(timezone.utc)}},
            return_document=ReturnDocument.AFTER
        )
        return serialize_doc(doc)

    def delete(self, entity_id: int) -> bool:
        result = self.collection.delete_one({self.id_field: entity_id})
        return result.deleted_count > 0

    def conflict_message(self, key_pattern: Optional[Dict[str, int]] = None) -> str:
        """Message for a duplicate-key error on the given index key pattern."""
        if key_pattern:
            for keys, message in self.unique_keys:
                if set(keys) == set(key_pattern):
                    return message
        return f"{self.entity_name} already exists"


# ============================================================
# ENTITY REPOSITORIES
# ============================================================

class StudentRepository(MongoRepository):
    collection_name = "students"
    id_field = "Student_ID"
    entity_name = "Student"
    unique_keys = [
        (("Student_ID",), "Student ID already exists"),
        (("Email",), "Email already exists"),
    ]


class EnrollmentRepository(MongoRepository):
    collection_name = "enrollments"
    id_field = "Enrollment_ID"
    entity_name = "Enrollment"
    unique_keys = [
        (("Enrollment_ID",), "Enrollment ID already exists"),
        (("Student_ID", "Course_ID"), "Enrollment already exists"),
    ]


class SubjectRepository(MongoRepository):
    collection_name = "subjects"
    id_field = "Subject_ID"
    entity_name = "Subject"
    unique_keys = [
        (("Subject_ID",), "Subject ID already exists"),
    ]


# ============================================================
# USERS COLLECTION
# Auth credentials - the password itself is never stored
# ============================================================

class UserRepository:

    def __init__(self, db: Database):
        self.collection: Collection = db[COLLECTIONS["users"]]

    def insert(self, username: str, password_hash: str) -> str:
        doc = {
            "username": username,
            "password_hash": password_hash,
            "createdAt": datetime.now(timezone.utc)
        }
        result = self.collection.insert_one(doc)
        return str(result.inserted_id)

    def get_by_username(self, username: str) -> Optional[dict]:
        doc = self.collection.find_one({"username": username})
        return serialize_doc(doc)

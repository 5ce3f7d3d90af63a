"""
Pydantic Schemas - Request/Response Validation

All API request and response schemas in one file for simplicity.

Entity schemas double as the declarative field table: types, required-ness,
ranges, lengths and enums live on the fields, and the per-field error
messages live in each model's `messages` table (read by
app.schemas.validation).
"""

from pydantic import AfterValidator, BaseModel, BeforeValidator, ConfigDict, EmailStr, Field
from pydantic_core import PydanticCustomError
from typing import Annotated, ClassVar, Dict, List, Optional
from datetime import date, datetime
from enum import Enum


# ============================================================
# ENUMS
# ============================================================

class StudentStatusEnum(str, Enum):
    active = "Active"
    inactive = "Inactive"
    graduated = "Graduated"
    dropped = "Dropped"


class SexEnum(str, Enum):
    male = "Male"
    female = "Female"
    other = "Other"


class CivilStatusEnum(str, Enum):
    single = "Single"
    married = "Married"
    divorced = "Divorced"
    widowed = "Widowed"


# Largest integer a JSON client can represent exactly; also fits BSON int64
SAFE_INT_MAX = 2**53 - 1


def _reject_bool(value):
    if isinstance(value, bool):
        raise PydanticCustomError("int_bool", "Input should be a number, not a boolean")
    return value


def _check_safe(value: int) -> int:
    if not -SAFE_INT_MAX <= value <= SAFE_INT_MAX:
        raise PydanticCustomError("int_unsafe", "Input must be a safe number")
    return value


SafeInt = Annotated[int, BeforeValidator(_reject_bool), AfterValidator(_check_safe)]
YearLevelInt = Annotated[int, Field(ge=1, le=6), BeforeValidator(_reject_bool)]


class EntitySchema(BaseModel):
    """Base for entity payloads. Unknown fields are rejected."""

    model_config = ConfigDict(extra="forbid")

    # field -> {error kind -> message}; kinds: required, type, range, length, enum, format
    messages: ClassVar[Dict[str, Dict[str, str]]] = {}


# ============================================================
# STUDENT SCHEMAS
# ============================================================

STUDENT_MESSAGES = {
    "Student_ID": {
        "required": "Student ID is required",
        "type": "Student ID must be a number",
    },
    "StudentStatus": {
        "required": "Student Status is required",
        "type": "Student Status must be a string",
        "enum": "Student Status must be one of the following: Active, Inactive, Graduated, Dropped",
    },
    "YearLevel": {
        "required": "Year Level is required",
        "type": "Year Level must be a number",
        "range": "Year Level must be between 1 and 6",
    },
    "FirstName": {
        "required": "First name is required",
        "length": "First name cannot exceed 50 characters",
    },
    "LastName": {
        "required": "Last name is required",
        "length": "Last name cannot exceed 50 characters",
    },
    "MiddleName": {"length": "Middle name cannot exceed 50 characters"},
    "Address": {
        "required": "Address is required",
        "length": "Address cannot exceed 255 characters",
    },
    "Email": {
        "required": "Email is required",
        "type": "Please provide a valid email address",
        "format": "Please provide a valid email address",
    },
    "Phone": {
        "required": "Phone number is required",
        "type": "Phone number must be a valid number",
    },
    "DateOfBirth": {
        "required": "Date of Birth is required",
        "type": "Date of Birth must be a valid date",
    },
    "PlaceOfBirth": {
        "required": "Place of Birth is required",
        "length": "Place of Birth cannot exceed 100 characters",
    },
    "Sex": {
        "required": "Sex is required",
        "type": "Sex must be a string",
        "enum": "Sex must be one of the following: Male, Female, Other",
    },
    "Religion": {
        "required": "Religion is required",
        "length": "Religion cannot exceed 50 characters",
    },
    "Nationality": {
        "required": "Nationality is required",
        "length": "Nationality cannot exceed 50 characters",
    },
    "CivilStatus": {
        "required": "Civil Status is required",
        "type": "Civil Status must be a string",
        "enum": "Civil Status must be one of the following: Single, Married, Divorced, Widowed",
    },
    "Occupation": {"length": "Occupation cannot exceed 100 characters"},
    "WorkAddress": {"length": "Work Address cannot exceed 255 characters"},
    "Course_ID": {
        "required": "Course ID is required",
        "type": "Course ID must be a number",
    },
    "Subject_ID": {
        "required": "Subject ID is required",
        "type": "Subject ID must be a number",
    },
    "Enrollment_ID": {
        "required": "Enrollment ID is required",
        "type": "Enrollment ID must be a number",
    },
}


class StudentCreate(EntitySchema):
    messages: ClassVar[Dict[str, Dict[str, str]]] = STUDENT_MESSAGES

    Student_ID: SafeInt
    StudentStatus: StudentStatusEnum
    YearLevel: YearLevelInt
    FirstName: str = Field(..., max_length=50)
    LastName: str = Field(..., max_length=50)
    MiddleName: Optional[str] = Field(None, max_length=50)
    Address: str = Field(..., max_length=255)
    Email: EmailStr
    Phone: SafeInt
    DateOfBirth: date
    PlaceOfBirth: str = Field(..., max_length=100)
    Sex: SexEnum
    Religion: str = Field(..., max_length=50)
    Nationality: str = Field(..., max_length=50)
    CivilStatus: CivilStatusEnum
    Occupation: Optional[str] = Field(None, max_length=100)
    WorkAddress: Optional[str] = Field(None, max_length=255)
    Course_ID: SafeInt
    Subject_ID: SafeInt
    Enrollment_ID: SafeInt


class StudentUpdate(EntitySchema):
    messages: ClassVar[Dict[str, Dict[str, str]]] = STUDENT_MESSAGES

    Student_ID: Optional[SafeInt] = None
    StudentStatus: Optional[StudentStatusEnum] = None
    YearLevel: Optional[YearLevelInt] = None
    FirstName: Optional[str] = Field(None, max_length=50)
    LastName: Optional[str] = Field(None, max_length=50)
    MiddleName: Optional[str] = Field(None, max_length=50)
    Address: Optional[str] = Field(None, max_length=255)
    Email: Optional[EmailStr] = None
    Phone: Optional[SafeInt] = None
    DateOfBirth: Optional[date] = None
    PlaceOfBirth: Optional[str] = Field(None, max_length=100)
    Sex: Optional[SexEnum] = None
    Religion: Optional[str] = Field(None, max_length=50)
    Nationality: Optional[str] = Field(None, max_length=50)
    CivilStatus: Optional[CivilStatusEnum] = None
    Occupation: Optional[str] = Field(None, max_length=100)
    WorkAddress: Optional[str] = Field(None, max_length=255)
    Course_ID: Optional[SafeInt] = None
    Subject_ID: Optional[SafeInt] = None
    Enrollment_ID: Optional[SafeInt] = None


# ============================================================
# ENROLLMENT SCHEMAS
# ============================================================

ENROLLMENT_MESSAGES = {
    "Enrollment_ID": {
        "required": "Enrollment_ID is required",
        "type": "Enrollment_ID must be a number",
    },
    "Student_ID": {
        "required": "Student_ID is required",
        "type": "Student_ID must be a number",
    },
    "Course_ID": {
        "required": "Course_ID is required",
        "type": "Course_ID must be a number",
    },
    "EnrollmentDate": {
        "required": "EnrollmentDate is required",
        "type": "EnrollmentDate must be a valid date",
    },
}


class EnrollmentCreate(EntitySchema):
    messages: ClassVar[Dict[str, Dict[str, str]]] = ENROLLMENT_MESSAGES

    Enrollment_ID: SafeInt
    Student_ID: SafeInt
    Course_ID: SafeInt
    EnrollmentDate: date


class EnrollmentUpdate(EntitySchema):
    messages: ClassVar[Dict[str, Dict[str, str]]] = ENROLLMENT_MESSAGES

    Enrollment_ID: Optional[SafeInt] = None
    Student_ID: Optional[SafeInt] = None
    Course_ID: Optional[SafeInt] = None
    EnrollmentDate: Optional[date] = None


# ============================================================
# SUBJECT SCHEMAS
# ============================================================

SUBJECT_MESSAGES = {
    "Subject_ID": {
        "required": "Subject ID is required",
        "type": "Subject ID must be a number",
    },
    "SubjectName": {
        "required": "Subject Name is required",
        "length": "Subject Name cannot exceed 100 characters",
    },
    "SubjectDescription": {
        "required": "Subject Description is required",
        "length": "Subject Description cannot exceed 500 characters",
    },
    "Course_ID": {
        "required": "Course ID is required",
        "type": "Course ID must be a number",
    },
}


class SubjectCreate(EntitySchema):
    messages: ClassVar[Dict[str, Dict[str, str]]] = SUBJECT_MESSAGES

    Subject_ID: SafeInt
    SubjectName: str = Field(..., max_length=100)
    SubjectDescription: str = Field(..., max_length=500)
    Course_ID: SafeInt


class SubjectUpdate(EntitySchema):
    messages: ClassVar[Dict[str, Dict[str, str]]] = SUBJECT_MESSAGES

    Subject_ID: Optional[SafeInt] = None
    SubjectName: Optional[str] = Field(None, max_length=100)
    SubjectDescription: Optional[str] = Field(None, max_length=500)
    Course_ID: Optional[SafeInt] = None


# ============================================================
# AUTH SCHEMAS
# ============================================================

class RegisterRequest(EntitySchema):
    messages: ClassVar[Dict[str, Dict[str, str]]] = {
        "username": {
            "required": "Username is required",
            "type": "Username must be a string",
            "length": "Username must be between 3 and 50 characters",
        },
        "password": {
            "required": "Password is required",
            "type": "Password must be a string",
            "length": "Password must be at least 8 characters",
        },
    }

    username: str = Field(..., min_length=3, max_length=50)
    password: str = Field(..., min_length=8)


class LoginRequest(BaseModel):
    username: str
    password: str


class TokenResponse(BaseModel):
    access_token: str
    token_type: str = "bearer"
    expires_in: int


class UserResponse(BaseModel):
    username: str
    createdAt: Optional[datetime] = None


# ============================================================
# GENERIC SCHEMAS
# ============================================================

class Pagination(BaseModel):
    total: int
    pages: int
    page: int
    limit: int


class PageResponse(BaseModel):
    data: List[dict]
    pagination: Pagination


class FieldErrorResponse(BaseModel):
    field: str
    message: str


class ValidationErrorResponse(BaseModel):
    message: str
    details: List[FieldErrorResponse] = []


class MessageResponse(BaseModel):
    message: str
    success: bool = True


class ErrorResponse(BaseModel):
    message: str


# OpenAPI error documentation for entity routes
CREATE_ERRORS = {
    400: {"model": ValidationErrorResponse},
    409: {"model": ErrorResponse},
}

UPDATE_ERRORS = {
    400: {"model": ValidationErrorResponse},
    404: {"model": ErrorResponse},
    409: {"model": ErrorResponse},
}

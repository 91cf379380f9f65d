"""
Request bodies with a fixed shape.

Generic create/update endpoints accept free-form JSON objects instead. The
booking bodies declare their fields but require none of them, so a booking
that names an unknown user or resource always ends in a 404, never a 422.
"""
from typing import Optional, Union

from pydantic import BaseModel, Field

RecordId = Union[int, str]


class LoginRequest(BaseModel):
    registrationNumber: str = ""
    password: str = ""


class RegistrationRequest(BaseModel):
    registrationNumber: str
    fullName: str
    dateOfBirth: str = ""
    password: str
    email: str = ""
    phoneNumber: str = ""
    department: str = ""
    role: str = Field("Student", description="Student, Faculty or Staff (not enforced)")


class BookingRequest(BaseModel):
    userId: Optional[RecordId] = None
    resourceId: Optional[RecordId] = None
    date: str = Field("", description="ISO date YYYY-MM-DD")
    startTime: str = Field("", description="HH:MM 24h")
    endTime: str = Field("", description="HH:MM 24h")


class SessionBookingRequest(BaseModel):
    resourceId: Optional[RecordId] = None
    date: str = ""
    startTime: str = ""
    endTime: str = ""

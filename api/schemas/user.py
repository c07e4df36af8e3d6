# api/schemas/user.py
from datetime import datetime
from pydantic import BaseModel, ConfigDict

class Borrower(BaseModel):
    id: str
    full_name: str
    email: str

    model_config = ConfigDict(from_attributes=True)

class UserProfile(BaseModel):
    id: str
    first_name: str
    last_name: str
    full_name: str
    email: str
    registered_at: datetime

    model_config = ConfigDict(from_attributes=True)

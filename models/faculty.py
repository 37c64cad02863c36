# models/faculty.py
from typing import Optional
from pydantic import BaseModel, Field

from models.common import BilingualName


class FacultyCreate(BaseModel):
    ma_khoa: str = Field(..., min_length=1)
    ten_khoa: BilingualName


class FacultyUpdate(BaseModel):
    ma_khoa: Optional[str] = None
    ten_khoa: Optional[BilingualName] = None

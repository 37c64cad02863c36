# models/course.py
from typing import List, Optional
from pydantic import BaseModel, Field

from models.common import BilingualName


class CourseCreate(BaseModel):
    ma_mon_hoc: str = Field(..., min_length=1)  # course code, unique
    ten: BilingualName
    tin_chi: int = Field(..., ge=1)  # credits
    khoa: str  # faculty id
    mon_tien_quyet: List[str] = []  # prerequisite course ids
    vo_hieu_hoa: bool = False  # closed for registration


class CourseUpdate(BaseModel):
    ma_mon_hoc: Optional[str] = None
    ten: Optional[BilingualName] = None
    tin_chi: Optional[int] = Field(None, ge=1)
    khoa: Optional[str] = None
    mon_tien_quyet: Optional[List[str]] = None
    vo_hieu_hoa: Optional[bool] = None

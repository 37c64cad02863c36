# models/enrollment.py
from datetime import datetime
from typing import Optional
from pydantic import BaseModel


class EnrollmentCreate(BaseModel):
    ma_sv: str  # student code
    ma_mon: str  # course code
    ma_lop: str  # open class code
    thoi_gian_dang_ky: Optional[datetime] = None
    thoi_gian_huy: Optional[datetime] = None

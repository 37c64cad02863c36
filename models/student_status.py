# models/student_status.py
from typing import Optional
from pydantic import BaseModel

from models.common import BilingualName


class StudentStatusCreate(BaseModel):
    tinh_trang: BilingualName


class StudentStatusUpdate(BaseModel):
    tinh_trang: Optional[BilingualName] = None

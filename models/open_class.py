# models/open_class.py
from typing import Optional
from pydantic import BaseModel, Field


class OpenClassCreate(BaseModel):
    ma_lop: str = Field(..., min_length=1)
    ma_mon_hoc: str  # course id
    si_so: int = Field(0, ge=0)  # enrolled students
    nam_hoc: int
    hoc_ky: int
    giang_vien: str
    so_luong_toi_da: int = Field(..., ge=1, description="Maximum student count must be at least 1")
    lich_hoc: str
    phong_hoc: str


class OpenClassUpdate(BaseModel):
    ma_lop: Optional[str] = None
    ma_mon_hoc: Optional[str] = None
    si_so: Optional[int] = Field(None, ge=0)
    nam_hoc: Optional[int] = None
    hoc_ky: Optional[int] = None
    giang_vien: Optional[str] = None
    so_luong_toi_da: Optional[int] = Field(None, ge=1)
    lich_hoc: Optional[str] = None
    phong_hoc: Optional[str] = None

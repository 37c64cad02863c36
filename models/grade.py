# models/grade.py
from typing import Optional
from pydantic import BaseModel, Field


class GradeCreate(BaseModel):
    ma_lop: str = Field(..., min_length=1)
    ma_khoa_hoc: str = Field(..., min_length=1)
    nam_hoc: int
    hoc_ky: int
    giang_vien: str
    so_luong_toi_da: int = Field(..., ge=1)
    lich_hoc: str
    phong_hoc: str


class GradeUpdate(BaseModel):
    ma_lop: Optional[str] = None
    ma_khoa_hoc: Optional[str] = None
    nam_hoc: Optional[int] = None
    hoc_ky: Optional[int] = None
    giang_vien: Optional[str] = None
    so_luong_toi_da: Optional[int] = Field(None, ge=1)
    lich_hoc: Optional[str] = None
    phong_hoc: Optional[str] = None

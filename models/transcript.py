# models/transcript.py
from typing import Optional
from pydantic import BaseModel, Field


class TranscriptCreate(BaseModel):
    ma_mon_hoc: str  # course id
    ma_so_sinh_vien: str  # student id
    diem: float = Field(..., ge=0, le=10)
    trang_thai: str  # e.g. passed / failed
    hoc_ky: Optional[int] = None
    nam_hoc: Optional[int] = None


class TranscriptUpdate(BaseModel):
    ma_mon_hoc: Optional[str] = None
    ma_so_sinh_vien: Optional[str] = None
    diem: Optional[float] = Field(None, ge=0, le=10)
    trang_thai: Optional[str] = None
    hoc_ky: Optional[int] = None
    nam_hoc: Optional[int] = None

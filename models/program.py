# models/program.py
from typing import Optional
from pydantic import BaseModel, Field

from models.common import BilingualName


class ProgramCreate(BaseModel):
    ma: str = Field(..., min_length=1)
    name: BilingualName


class ProgramUpdate(BaseModel):
    ma: Optional[str] = None
    name: Optional[BilingualName] = None

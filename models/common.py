# models/common.py
from pydantic import BaseModel


class BilingualName(BaseModel):
    en: str
    vi: str

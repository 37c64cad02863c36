# models/student.py
import re
from datetime import datetime
from typing import Annotated, List, Literal, Optional, Union

from pydantic import BaseModel, EmailStr, Field, field_validator

from config import settings


class Address(BaseModel):
    chi_tiet: Optional[str] = None  # house number, street
    phuong_xa: Optional[str] = None
    quan_huyen: Optional[str] = None
    tinh_thanh_pho: Optional[str] = None
    quoc_gia: Optional[str] = "Việt Nam"


class _IDDocumentBase(BaseModel):
    so: str
    ngay_cap: datetime
    noi_cap: str
    ngay_het_han: datetime


class CMNDDocument(_IDDocumentBase):
    type: Literal["cmnd"]


class CCCDDocument(_IDDocumentBase):
    type: Literal["cccd"]
    co_gan_chip: bool


class PassportDocument(_IDDocumentBase):
    type: Literal["passport"]
    quoc_gia_cap: str
    ghi_chu: Optional[str] = None


IDDocument = Annotated[
    Union[CMNDDocument, CCCDDocument, PassportDocument],
    Field(discriminator="type"),
]


def check_email(value: Optional[str]) -> Optional[str]:
    if not value:
        return value
    domains = settings.allowed_email_domains
    if domains and not any(value.endswith(domain) for domain in domains):
        raise ValueError(f"Email must belong to one of the following domains: {', '.join(domains)}")
    return value


def check_phone(value: Optional[str]) -> Optional[str]:
    if not value or not settings.phone_number_regex:
        return value
    if not re.match(settings.phone_number_regex, value):
        raise ValueError(f"Invalid {settings.phone_number_country} phone number format")
    return value


class StudentCreate(BaseModel):
    ma_so_sinh_vien: str = Field(..., min_length=1)
    ho_ten: str = Field(..., min_length=1)
    ngay_sinh: str
    gioi_tinh: str
    khoa: str  # faculty id
    khoa_hoc: str
    chuong_trinh: str  # program id
    tinh_trang: str  # student status id
    email: Optional[EmailStr] = None
    so_dien_thoai: Optional[str] = None
    dia_chi_thuong_tru: Optional[Address] = None
    dia_chi_tam_tru: Optional[Address] = None
    dia_chi_nhan_thu: Optional[Address] = None
    giay_to_tuy_than: List[IDDocument] = []

    @field_validator("email")
    @classmethod
    def validate_email(cls, value):
        return check_email(value)

    @field_validator("so_dien_thoai")
    @classmethod
    def validate_phone(cls, value):
        return check_phone(value)


class StudentUpdate(BaseModel):
    ma_so_sinh_vien: Optional[str] = None
    ho_ten: Optional[str] = None
    ngay_sinh: Optional[str] = None
    gioi_tinh: Optional[str] = None
    khoa: Optional[str] = None
    khoa_hoc: Optional[str] = None
    chuong_trinh: Optional[str] = None
    tinh_trang: Optional[str] = None
    email: Optional[EmailStr] = None
    so_dien_thoai: Optional[str] = None
    dia_chi_thuong_tru: Optional[Address] = None
    dia_chi_tam_tru: Optional[Address] = None
    dia_chi_nhan_thu: Optional[Address] = None
    giay_to_tuy_than: Optional[List[IDDocument]] = None

    @field_validator("email")
    @classmethod
    def validate_email(cls, value):
        return check_email(value)

    @field_validator("so_dien_thoai")
    @classmethod
    def validate_phone(cls, value):
        return check_phone(value)

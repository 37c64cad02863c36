import pytest
from pydantic import ValidationError

from config import settings
from models.student import CCCDDocument, PassportDocument, StudentCreate, StudentUpdate

BASE = {
    "ma_so_sinh_vien": "21120001",
    "ho_ten": "Nguyễn Văn An",
    "ngay_sinh": "2003-05-01",
    "gioi_tinh": "Nam",
    "khoa": "f",
    "khoa_hoc": "2021",
    "chuong_trinh": "p",
    "tinh_trang": "s",
}

DOCUMENT = {"so": "1", "ngay_cap": "2020-01-01", "noi_cap": "HCM", "ngay_het_han": "2030-01-01"}


def test_identity_documents_are_discriminated_by_type():
    student = StudentCreate(
        **BASE,
        giay_to_tuy_than=[
            {**DOCUMENT, "type": "cccd", "co_gan_chip": True},
            {**DOCUMENT, "type": "passport", "quoc_gia_cap": "Việt Nam"},
        ],
    )
    cccd, passport = student.giay_to_tuy_than
    assert isinstance(cccd, CCCDDocument) and cccd.co_gan_chip is True
    assert isinstance(passport, PassportDocument) and passport.ghi_chu is None


def test_document_type_specific_fields_are_required():
    with pytest.raises(ValidationError):
        StudentCreate(**BASE, giay_to_tuy_than=[{**DOCUMENT, "type": "passport"}])
    with pytest.raises(ValidationError):
        StudentCreate(**BASE, giay_to_tuy_than=[{**DOCUMENT, "type": "visa"}])


@pytest.mark.parametrize("email", ["a..b@x.vn", "a@b..vn", ".a@x.vn", "a@-x.vn", "a(b)@x.vn", "not-an-email"])
def test_malformed_email_is_rejected(email):
    with pytest.raises(ValidationError):
        StudentUpdate(email=email)
    with pytest.raises(ValidationError):
        StudentCreate(**BASE, email=email)


def test_email_domain_restriction(monkeypatch):
    monkeypatch.setattr(settings, "allowed_email_domains", ["@student.hcmus.edu.vn"])
    assert StudentCreate(**BASE, email="an@student.hcmus.edu.vn").email == "an@student.hcmus.edu.vn"
    with pytest.raises(ValidationError, match="student.hcmus.edu.vn"):
        StudentCreate(**BASE, email="an@gmail.com")


def test_phone_format(monkeypatch):
    monkeypatch.setattr(settings, "phone_number_regex", r"^(\+84|0)[35789]\d{8}$")
    assert StudentUpdate(so_dien_thoai="0901234567").so_dien_thoai == "0901234567"
    with pytest.raises(ValidationError, match="Vietnamese phone number"):
        StudentUpdate(so_dien_thoai="12345")


def test_address_country_defaults():
    student = StudentCreate(**BASE, dia_chi_thuong_tru={"chi_tiet": "227 Nguyễn Văn Cừ"})
    assert student.dia_chi_thuong_tru.quoc_gia == "Việt Nam"


def test_update_dump_only_has_given_fields():
    assert StudentUpdate(ho_ten="X").model_dump(exclude_unset=True, exclude_none=True) == {"ho_ten": "X"}

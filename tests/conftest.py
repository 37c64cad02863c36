import pytest
from fastapi.testclient import TestClient
from mongomock_motor import AsyncMongoMockClient

from database import get_db
from main import app
from repositories.faculty import FacultyRepository
from repositories.program import ProgramRepository
from repositories.student_status import StudentStatusRepository

STATUSES = {
    "studying": {"vi": "Đang học", "en": "Studying"},
    "reserved": {"vi": "Bảo lưu", "en": "Reserved"},
    "graduated": {"vi": "Đã tốt nghiệp", "en": "Graduated"},
    "dropped": {"vi": "Đã thôi học", "en": "Dropped out"},
}


@pytest.fixture
def db():
    """Fresh in-memory database per test."""
    return AsyncMongoMockClient()["university_test"]


@pytest.fixture
def client(db):
    app.dependency_overrides[get_db] = lambda: db
    yield TestClient(app)
    app.dependency_overrides.clear()


@pytest.fixture
async def references(db):
    """Seed one faculty, one program and the main statuses; returns their ids as strings."""
    faculty = await FacultyRepository(db).create(
        {"ma_khoa": "CNTT", "ten_khoa": {"vi": "Công Nghệ Thông Tin", "en": "Information Technology"}}
    )
    program = await ProgramRepository(db).create(
        {"ma": "CLC", "name": {"vi": "Chất lượng cao", "en": "High Quality"}}
    )
    ids = {"faculty": str(faculty["_id"]), "program": str(program["_id"])}
    statuses = StudentStatusRepository(db)
    for key, names in STATUSES.items():
        status = await statuses.create({"tinh_trang": names})
        ids[key] = str(status["_id"])
    return ids


@pytest.fixture
def make_student():
    def _make(refs, **overrides):
        data = {
            "ma_so_sinh_vien": "21120001",
            "ho_ten": "Nguyễn Văn An",
            "ngay_sinh": "2003-05-01",
            "gioi_tinh": "Nam",
            "khoa": refs["faculty"],
            "khoa_hoc": "2021",
            "chuong_trinh": refs["program"],
            "tinh_trang": refs["studying"],
            "email": "an.nguyen@student.hcmus.edu.vn",
            "so_dien_thoai": "0901234567",
        }
        data.update(overrides)
        return data

    return _make

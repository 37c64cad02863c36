import pytest
from bson import ObjectId

from common.exceptions import ConflictException
from common.pagination import Pagination
from database import init_db
from repositories.course import CourseRepository
from repositories.enrollment import EnrollmentRepository
from repositories.faculty import FacultyRepository
from repositories.student import StudentRepository


def faculty(code, vi="Khoa", en="Faculty"):
    return {"ma_khoa": code, "ten_khoa": {"vi": vi, "en": en}}


async def test_create_sets_id_and_timestamps(db):
    record = await FacultyRepository(db).create(faculty("CNTT"))
    assert isinstance(record["_id"], ObjectId)
    assert record["created_at"] == record["updated_at"]
    assert "deleted_at" not in record


async def test_soft_deleted_record_is_invisible_but_kept(db):
    repository = FacultyRepository(db)
    record = await repository.create(faculty("CNTT"))
    id = str(record["_id"])

    deleted = await repository.soft_delete(id)
    assert deleted["deleted_at"] is not None

    assert await repository.detail(id) is None
    assert await repository.find_by_code("CNTT") is None
    assert await repository.update(id, {"ma_khoa": "X"}) is None
    assert await repository.soft_delete(id) is None
    page = await repository.find_all(Pagination(1, 10))
    assert page.data == [] and page.total == 0

    raw = await db.faculties.find_one({"_id": record["_id"]})
    assert raw is not None
    assert raw["ma_khoa"] == "CNTT"


async def test_null_deleted_at_counts_as_active(db):
    result = await db.faculties.insert_one({**faculty("TOAN"), "deleted_at": None})
    assert (await FacultyRepository(db).detail(str(result.inserted_id)))["ma_khoa"] == "TOAN"


async def test_empty_update_leaves_record_untouched(db):
    repository = FacultyRepository(db)
    record = await repository.create(faculty("CNTT"))
    unchanged = await repository.update(str(record["_id"]), {})
    assert unchanged["ma_khoa"] == "CNTT"
    assert unchanged["updated_at"] == record["updated_at"]


async def test_update_changes_only_given_fields(db):
    repository = FacultyRepository(db)
    record = await repository.create(faculty("CNTT", vi="Công nghệ"))
    updated = await repository.update(str(record["_id"]), {"ma_khoa": "IT"})
    assert updated["ma_khoa"] == "IT"
    assert updated["ten_khoa"]["vi"] == "Công nghệ"


async def test_find_all_pages_and_counts_active_records(db):
    repository = FacultyRepository(db)
    for i in range(15):
        await repository.create(faculty(f"K{i:02d}"))
    gone = await repository.create(faculty("GONE"))
    await repository.soft_delete(str(gone["_id"]))

    page = await repository.find_all(Pagination(2, 10))
    assert page.total == 15
    assert page.total_pages == 2
    assert [f["ma_khoa"] for f in page.data] == [f"K{i:02d}" for i in range(10, 15)]


async def test_find_all_counts_with_the_keyword_filter(db):
    repository = FacultyRepository(db)
    await repository.create(faculty("CNTT", vi="Công Nghệ Thông Tin"))
    await repository.create(faculty("TOAN", vi="Toán học"))
    await repository.create(faculty("LY", vi="Vật lý"))

    page = await repository.find_all(Pagination(1, 10), keyword="thông")
    assert page.total == 1
    assert page.data[0]["ma_khoa"] == "CNTT"


async def test_find_by_code_can_exclude_a_record(db):
    repository = FacultyRepository(db)
    record = await repository.create(faculty("CNTT"))
    assert await repository.find_by_code("CNTT") is not None
    assert await repository.find_by_code("CNTT", exclude_id=str(record["_id"])) is None


async def test_find_by_email_or_phone(db):
    repository = StudentRepository(db)
    student = await repository.create({"ma_so_sinh_vien": "1", "email": "a@x.vn", "so_dien_thoai": "0901"})
    assert await repository.find_by_email_or_phone("a@x.vn", None) is not None
    assert await repository.find_by_email_or_phone(None, "0901") is not None
    assert await repository.find_by_email_or_phone("b@x.vn", "0902") is None
    assert await repository.find_by_email_or_phone("a@x.vn", None, exclude_id=str(student["_id"])) is None


async def test_enrollment_upsert_reuses_the_active_record(db):
    repository = EnrollmentRepository(db)
    first = await repository.upsert({"ma_sv": "21120001", "ma_mon": "CS101", "ma_lop": "CS101-01"})
    second = await repository.upsert({"ma_sv": "21120001", "ma_mon": "CS101", "ma_lop": "CS101-01"})

    assert first["_id"] == second["_id"]
    assert first["thoi_gian_dang_ky"] is not None
    assert await repository.count() == 1


async def test_enrollment_soft_delete_by_course(db):
    repository = EnrollmentRepository(db)
    await repository.upsert({"ma_sv": "1", "ma_mon": "CS101", "ma_lop": "L1"})
    await repository.upsert({"ma_sv": "2", "ma_mon": "CS101", "ma_lop": "L1"})
    await repository.upsert({"ma_sv": "1", "ma_mon": "MA101", "ma_lop": "L2"})

    assert await repository.soft_delete_by_course_id("CS101") == 2
    remaining = await repository.get_all()
    assert [e["ma_mon"] for e in remaining] == ["MA101"]
    cancelled = await db.enrollments.find_one({"ma_sv": "2"})
    assert cancelled["thoi_gian_huy"] is not None


async def test_duplicate_course_code_is_a_conflict_once_indexes_exist(db):
    await init_db(db)
    repository = CourseRepository(db)
    course = {"ma_mon_hoc": "CS101", "ten": {"vi": "Nhập môn", "en": "Intro"}, "tin_chi": 4, "khoa": "f"}
    await repository.create(dict(course))
    with pytest.raises(ConflictException) as info:
        await repository.create(dict(course))
    assert info.value.status_code == 409
    assert info.value.error_code == "DUPLICATE_COURSE"


async def test_find_one_and_get_by_id_skip_deleted_records(db):
    repository = FacultyRepository(db)
    record = await repository.create(faculty("CNTT"))
    id = str(record["_id"])
    assert (await repository.get_by_id(id))["ma_khoa"] == "CNTT"
    assert (await repository.find_one({"ma_khoa": "CNTT"}))["_id"] == record["_id"]

    await repository.soft_delete(id)
    assert await repository.get_by_id(id) is None
    assert await repository.find_one({"ma_khoa": "CNTT"}) is None

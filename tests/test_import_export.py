import io
import os

import pandas as pd
import pytest
from starlette.datastructures import UploadFile

from common.exceptions import ValidationException
from common.student_transformer import COLUMNS
from services.export_service import ExportService
from services.import_service import ImportService
from services.student import StudentService


def upload(path_or_bytes, filename=None):
    if isinstance(path_or_bytes, bytes):
        content = path_or_bytes
    else:
        with open(path_or_bytes, "rb") as f:
            content = f.read()
        filename = filename or os.path.basename(path_or_bytes)
    return UploadFile(file=io.BytesIO(content), filename=filename)


CSV_TEXT = (
    "Mã số sinh viên,Họ tên,Ngày sinh,Giới tính,Mã khoa,Khóa học,Mã chương trình,Email,Số điện thoại,Tình trạng\n"
    "21120050,Phạm Minh Đức,2003-02-11,Nam,CNTT,2021,CLC,duc@student.hcmus.edu.vn,0911000111,Đang học\n"
    ",Thiếu Mã Số,2003-02-11,Nữ,CNTT,2021,CLC,,,Đang học\n"
)


async def test_export_csv_writes_every_active_student(db, references, make_student, tmp_path):
    students = StudentService.from_db(db)
    await students.create(make_student(references))
    deleted = await students.create(
        make_student(references, ma_so_sinh_vien="21120002", email="b@x.vn", so_dien_thoai="0902")
    )
    await students.delete(str(deleted["_id"]))

    export = await ExportService(students, export_dir=str(tmp_path)).export_students_to_csv()

    assert export["file_name"].startswith("student_export_") and export["file_name"].endswith(".csv")
    with open(export["file_path"], "rb") as f:
        assert f.read(3) == b"\xef\xbb\xbf"
    frame = pd.read_csv(export["file_path"], dtype=str, keep_default_na=False, encoding="utf-8-sig")
    assert list(frame.columns) == list(COLUMNS)
    assert frame["Mã số sinh viên"].tolist() == ["21120001"]
    assert frame["Mã khoa"].tolist() == ["CNTT"]
    assert frame["Số điện thoại"].tolist() == ["0901234567"]


async def test_export_excel(db, references, make_student, tmp_path):
    students = StudentService.from_db(db)
    await students.create(make_student(references))

    export = await ExportService(students, export_dir=str(tmp_path)).export_students_to_excel()

    frame = pd.read_excel(export["file_path"], sheet_name="Students", dtype=str)
    assert frame.loc[0, "Khoa"] == "Công Nghệ Thông Tin"
    assert export["media_type"].endswith("spreadsheetml.sheet")


async def test_import_csv_collects_row_errors(db, references):
    result = await ImportService.from_db(db).import_csv(upload(CSV_TEXT.encode("utf-8"), "students.csv"))

    assert result["success"] is True
    assert result["imported"] == 1
    assert len(result["errors"]) == 1
    assert result["errors"][0]["row"] == 3
    assert "Mã số sinh viên" in result["errors"][0]["error"]

    student = await StudentService.from_db(db).find_by_code("21120050")
    assert student["khoa"] == references["faculty"]
    assert student["tinh_trang"] == references["studying"]


async def test_import_updates_existing_students(db, references, make_student):
    students = StudentService.from_db(db)
    existing = await students.create(make_student(references, ma_so_sinh_vien="21120050", email=None, so_dien_thoai=None))

    result = await ImportService(students).import_csv(upload(CSV_TEXT.encode("utf-8"), "students.csv"))

    assert result["imported"] == 1
    updated = await students.detail(str(existing["_id"]))
    assert updated["ho_ten"] == "Phạm Minh Đức"
    assert await students.repository.count() == 1


async def test_export_then_import_round_trip(db, references, make_student, tmp_path):
    students = StudentService.from_db(db)
    original = await students.create(make_student(references))
    export = await ExportService(students, export_dir=str(tmp_path)).export_students_to_excel()
    await students.delete(str(original["_id"]))

    result = await ImportService(students).import_excel(upload(export["file_path"]))

    assert result == {"success": True, "imported": 1, "errors": []}
    restored = await students.find_by_code("21120001")
    assert restored["_id"] != original["_id"]
    for field in ("ho_ten", "khoa", "chuong_trinh", "tinh_trang", "email", "so_dien_thoai"):
        assert restored[field] == original[field]


@pytest.mark.parametrize("filename", ["students.txt", "students.xlsx"])
async def test_import_csv_rejects_other_extensions(db, filename):
    with pytest.raises(ValidationException) as info:
        await ImportService.from_db(db).import_csv(upload(b"a,b\n1,2\n", filename))
    assert info.value.error_code == "INVALID_FILE_TYPE"


async def test_import_rejects_empty_upload(db):
    with pytest.raises(ValidationException) as info:
        await ImportService.from_db(db).import_excel(upload(b"", "students.xlsx"))
    assert info.value.error_code == "EMPTY_FILE"


async def test_import_excel_only_accepts_xlsx(db):
    legacy_workbook = b"\xd0\xcf\x11\xe0\xa1\xb1\x1a\xe1" + b"\x00" * 504
    with pytest.raises(ValidationException) as info:
        await ImportService.from_db(db).import_excel(upload(legacy_workbook, "students.xls"))
    assert info.value.error_code == "INVALID_FILE_TYPE"
    assert info.value.status_code == 400

# common/student_transformer.py
from datetime import date, datetime
from typing import Dict, Optional

# Spreadsheet column label -> snake_case fallback key accepted on import.
COLUMNS = {
    "Mã số sinh viên": "ma_so_sinh_vien",
    "Họ tên": "ho_ten",
    "Ngày sinh": "ngay_sinh",
    "Giới tính": "gioi_tinh",
    "Mã khoa": "ma_khoa",
    "Khoa": "khoa",
    "Khóa học": "khoa_hoc",
    "Mã chương trình": "ma_chuong_trinh",
    "Chương trình": "chuong_trinh",
    "Email": "email",
    "Số điện thoại": "so_dien_thoai",
    "Tình trạng": "tinh_trang",
    "Địa chỉ chi tiết": "dia_chi_chi_tiet",
    "Phường/Xã": "phuong_xa",
    "Quận/Huyện": "quan_huyen",
    "Tỉnh/Thành phố": "tinh_thanh_pho",
    "Quốc gia": "quoc_gia",
    "Loại giấy tờ": "loai_giay_to",
    "Số giấy tờ": "so_giay_to",
    "Ngày cấp": "ngay_cap",
    "Nơi cấp": "noi_cap",
    "Quốc gia cấp": "quoc_gia_cap",
    "Có gắn chip": "co_gan_chip",
    "Ngày hết hạn": "ngay_het_han",
    "Ghi chú": "ghi_chu",
    "Ngày tạo": "created_at",
    "Ngày cập nhật": "updated_at",
}

DEFAULT_COUNTRY = "Việt Nam"
DEFAULT_STATUS = "Đang học"
TRUE_VALUES = ("true", "1", "yes", "x", "có")


def _text(value) -> str:
    if value is None:
        return ""
    if isinstance(value, (datetime, date)):
        return value.isoformat()
    if isinstance(value, float) and value != value:  # NaN from an empty cell
        return ""
    return str(value)


def _display(record: Optional[dict], field: str) -> str:
    if not record:
        return ""
    value = record.get(field)
    if isinstance(value, dict):
        return value.get("vi") or value.get("en") or ""
    return _text(value)


class StudentTransformer:
    """Maps students to flat spreadsheet rows and back."""

    @staticmethod
    def to_row(
        student: dict,
        faculties: Optional[Dict[str, dict]] = None,
        programs: Optional[Dict[str, dict]] = None,
        statuses: Optional[Dict[str, dict]] = None,
    ) -> dict:
        """Flatten a student; reference ids are looked up in the id -> record maps."""
        faculty = (faculties or {}).get(_text(student.get("khoa")))
        program = (programs or {}).get(_text(student.get("chuong_trinh")))
        status = (statuses or {}).get(_text(student.get("tinh_trang")))
        address = student.get("dia_chi_thuong_tru") or {}
        documents = student.get("giay_to_tuy_than") or []
        document = documents[0] if documents else {}
        doc_type = document.get("type", "")

        return {
            "Mã số sinh viên": _text(student.get("ma_so_sinh_vien")),
            "Họ tên": _text(student.get("ho_ten")),
            "Ngày sinh": _text(student.get("ngay_sinh")),
            "Giới tính": _text(student.get("gioi_tinh")),
            "Mã khoa": _display(faculty, "ma_khoa"),
            "Khoa": _display(faculty, "ten_khoa") or _text(student.get("khoa")),
            "Khóa học": _text(student.get("khoa_hoc")),
            "Mã chương trình": _display(program, "ma"),
            "Chương trình": _display(program, "name") or _text(student.get("chuong_trinh")),
            "Email": _text(student.get("email")),
            "Số điện thoại": _text(student.get("so_dien_thoai")),
            "Tình trạng": _display(status, "tinh_trang") or _text(student.get("tinh_trang")),
            "Địa chỉ chi tiết": _text(address.get("chi_tiet")),
            "Phường/Xã": _text(address.get("phuong_xa")),
            "Quận/Huyện": _text(address.get("quan_huyen")),
            "Tỉnh/Thành phố": _text(address.get("tinh_thanh_pho")),
            "Quốc gia": _text(address.get("quoc_gia")),
            "Loại giấy tờ": doc_type,
            "Số giấy tờ": _text(document.get("so")),
            "Ngày cấp": _text(document.get("ngay_cap")),
            "Nơi cấp": _text(document.get("noi_cap")),
            "Quốc gia cấp": _text(document.get("quoc_gia_cap")) if doc_type == "passport" else "",
            "Có gắn chip": _text(document.get("co_gan_chip")) if doc_type == "cccd" else "",
            "Ngày hết hạn": _text(document.get("ngay_het_han")),
            "Ghi chú": _text(document.get("ghi_chu")) if doc_type == "passport" else "",
            "Ngày tạo": _text(student.get("created_at")),
            "Ngày cập nhật": _text(student.get("updated_at")),
        }

    @staticmethod
    def value(row: dict, label: str) -> str:
        """Read a cell by its label, falling back to the snake_case key."""
        value = _text(row.get(label)).strip()
        if not value:
            value = _text(row.get(COLUMNS[label])).strip()
        return value

    @classmethod
    async def from_row(cls, row: dict, faculty_service, program_service, status_service) -> dict:
        """Build student data from a row, resolving faculty/program codes and the status name to ids."""
        def get(label):
            return cls.value(row, label)

        student = {
            "ma_so_sinh_vien": get("Mã số sinh viên"),
            "ho_ten": get("Họ tên"),
            "ngay_sinh": get("Ngày sinh"),
            "gioi_tinh": get("Giới tính"),
            "khoa_hoc": get("Khóa học"),
            "email": get("Email") or None,
            "so_dien_thoai": get("Số điện thoại") or None,
        }

        faculty_code = get("Mã khoa")
        if faculty_code:
            faculty = await faculty_service.find_by_code(faculty_code)
            if faculty:
                student["khoa"] = str(faculty["_id"])

        program_code = get("Mã chương trình")
        if program_code:
            program = await program_service.find_by_code(program_code)
            if program:
                student["chuong_trinh"] = str(program["_id"])

        status = await status_service.find_by_name(get("Tình trạng") or DEFAULT_STATUS)
        if status:
            student["tinh_trang"] = str(status["_id"])

        address = {
            "chi_tiet": get("Địa chỉ chi tiết"),
            "phuong_xa": get("Phường/Xã"),
            "quan_huyen": get("Quận/Huyện"),
            "tinh_thanh_pho": get("Tỉnh/Thành phố"),
        }
        if any(address.values()):
            address["quoc_gia"] = get("Quốc gia") or DEFAULT_COUNTRY
            student["dia_chi_thuong_tru"] = address

        doc_type = get("Loại giấy tờ").lower()
        number = get("Số giấy tờ")
        if doc_type and number:
            document = {
                "type": doc_type,
                "so": number,
                "ngay_cap": get("Ngày cấp") or None,
                "noi_cap": get("Nơi cấp"),
                "ngay_het_han": get("Ngày hết hạn") or None,
            }
            if doc_type == "cccd":
                document["co_gan_chip"] = get("Có gắn chip").lower() in TRUE_VALUES
            elif doc_type == "passport":
                document["quoc_gia_cap"] = get("Quốc gia cấp")
                document["ghi_chu"] = get("Ghi chú") or None
            student["giay_to_tuy_than"] = [document]

        return student

# services/exceptions.py
from common.exceptions import ConflictException, NotFoundException, ValidationException


class StudentNotFoundException(NotFoundException):
    entity = "Student"
    error_code = "STUDENT_NOT_FOUND"


class FacultyNotFoundException(NotFoundException):
    entity = "Faculty"
    error_code = "FACULTY_NOT_FOUND"


class ProgramNotFoundException(NotFoundException):
    entity = "Program"
    error_code = "PROGRAM_NOT_FOUND"


class StudentStatusNotFoundException(NotFoundException):
    entity = "Student status"
    error_code = "STUDENT_STATUS_NOT_FOUND"


class CourseNotFoundException(NotFoundException):
    entity = "Course"
    error_code = "COURSE_NOT_FOUND"


class OpenClassNotFoundException(NotFoundException):
    entity = "Open class"
    error_code = "OPEN_CLASS_NOT_FOUND"


class EnrollmentNotFoundException(NotFoundException):
    entity = "Enrollment"
    error_code = "ENROLLMENT_NOT_FOUND"


class GradeNotFoundException(NotFoundException):
    entity = "Grade"
    error_code = "GRADE_NOT_FOUND"


class TranscriptNotFoundException(NotFoundException):
    entity = "Transcript"
    error_code = "TRANSCRIPT_NOT_FOUND"


class FacultyNotExistsException(ValidationException):
    def __init__(self, faculty_id):
        super().__init__(
            f"Faculty with ID '{faculty_id}' does not exist", "FACULTY_NOT_EXISTS", details={"khoa": faculty_id}
        )


class ProgramNotExistsException(ValidationException):
    def __init__(self, program_id):
        super().__init__(
            f"Program with ID '{program_id}' does not exist",
            "PROGRAM_NOT_EXISTS",
            details={"chuong_trinh": program_id},
        )


class StudentStatusNotExistsException(ValidationException):
    def __init__(self, status_id):
        super().__init__(
            f"Student status with ID '{status_id}' does not exist",
            "STUDENT_STATUS_NOT_EXISTS",
            details={"tinh_trang": status_id},
        )


class CourseNotExistsException(ValidationException):
    def __init__(self, course_id):
        super().__init__(
            f"Course with ID '{course_id}' does not exist", "COURSE_NOT_EXISTS", details={"course": course_id}
        )


class StudentIdExistsException(ValidationException):
    def __init__(self, student_code):
        super().__init__(
            f"Student ID '{student_code}' already exists",
            "STUDENT_ID_EXISTS",
            details={"ma_so_sinh_vien": student_code},
        )


class StudentExistsException(ValidationException):
    def __init__(self, email=None, phone=None):
        super().__init__(
            "Student with this email or phone number already exists",
            "STUDENT_EXISTS",
            details={"email": email, "so_dien_thoai": phone},
        )


class InvalidStatusTransitionException(ValidationException):
    def __init__(self, current, target):
        super().__init__(
            f"Cannot change student status from '{current}' to '{target}'",
            "INVALID_STATUS_TRANSITION",
            details={"from": current, "to": target},
        )


class OpenClassConflictException(ConflictException):
    def __init__(self, class_code):
        super().__init__(
            f"Open class with code '{class_code}' already exists",
            "OPEN_CLASS_CONFLICT",
            details={"ma_lop": class_code},
        )


class OpenClassCapacityException(ValidationException):
    def __init__(self, enrolled, capacity):
        super().__init__(
            f"Class size {enrolled} exceeds the maximum of {capacity} students",
            "OPEN_CLASS_CAPACITY_EXCEEDED",
            details={"si_so": enrolled, "so_luong_toi_da": capacity},
        )


class EnrollmentValidationException(ValidationException):
    def __init__(self, missing):
        super().__init__(
            f"Enrollment requires non-empty fields: {', '.join(missing)}",
            "ENROLLMENT_VALIDATION_ERROR",
            details={field: ["must not be empty"] for field in missing},
        )

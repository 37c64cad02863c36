# services/course.py
from typing import Optional

from common.exceptions import ConflictException, ValidationException
from common.pagination import Pagination
from common.utils import is_valid_object_id
from repositories.course import CourseRepository
from services.base import BaseService
from services.exceptions import CourseNotExistsException, CourseNotFoundException, FacultyNotExistsException
from services.faculty import FacultyService


def parse_available(value: Optional[str]) -> Optional[bool]:
    if value is None or str(value).strip() == "":
        return None
    return str(value).strip().lower() in ("true", "1", "yes")


class CourseService(BaseService):
    name = "course"
    not_found = CourseNotFoundException

    def __init__(self, repository: CourseRepository, faculty_service: FacultyService):
        super().__init__(repository)
        self.faculty_service = faculty_service

    @classmethod
    def from_db(cls, db):
        return cls(CourseRepository(db), FacultyService.from_db(db))

    async def create(self, data: dict) -> dict:
        async with self._operation("create"):
            await self._validate_references(data)
            return await self.repository.create(data)

    async def update(self, id: str, data: dict) -> dict:
        async with self._operation("update"):
            self._check_id(id)
            await self._validate_references(data, exclude_id=id)
            record = await self.repository.update(id, data)
            if record is None:
                raise self.not_found(id)
            return record

    async def get(
        self,
        pagination: Pagination,
        search: Optional[str] = None,
        faculty: Optional[str] = None,
        available: Optional[str] = None,
    ):
        filters = {"khoa": faculty}
        is_available = parse_available(available)
        if is_available is True:
            filters["vo_hieu_hoa"] = {"$ne": True}
        elif is_available is False:
            filters["vo_hieu_hoa"] = True
        return await super().get(pagination, keyword=search, filters=filters)

    async def get_all_available(self):
        async with self._operation("get_all_available"):
            return await self.repository.find_all_available()

    async def _validate_references(self, data: dict, exclude_id: Optional[str] = None):
        code = data.get("ma_mon_hoc")
        if code and await self.repository.find_by_code(code, exclude_id=exclude_id):
            raise ConflictException(f"Course with code '{code}' already exists", "COURSE_CODE_EXISTS")
        faculty_id = data.get("khoa")
        if faculty_id:
            if not is_valid_object_id(faculty_id) or await self.faculty_service.repository.detail(faculty_id) is None:
                raise FacultyNotExistsException(faculty_id)
        for course_id in data.get("mon_tien_quyet") or []:
            if course_id == exclude_id:
                raise ValidationException("A course cannot be its own prerequisite", "INVALID_PREREQUISITE")
            if not is_valid_object_id(course_id) or await self.repository.detail(course_id) is None:
                raise CourseNotExistsException(course_id)

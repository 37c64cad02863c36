# services/student.py
import logging
from typing import Optional

from common.pagination import Pagination
from common.utils import is_valid_object_id
from config import STATUS_TRANSITIONS
from repositories.student import StudentRepository
from services.base import BaseService
from services.exceptions import (
    FacultyNotExistsException,
    InvalidStatusTransitionException,
    ProgramNotExistsException,
    StudentExistsException,
    StudentIdExistsException,
    StudentNotFoundException,
    StudentStatusNotExistsException,
)
from services.faculty import FacultyService
from services.program import ProgramService
from services.student_status import StudentStatusService, status_name

logger = logging.getLogger(__name__)


class StudentService(BaseService):
    name = "student"
    not_found = StudentNotFoundException

    def __init__(
        self,
        repository: StudentRepository,
        faculty_service: FacultyService,
        program_service: ProgramService,
        status_service: StudentStatusService,
    ):
        super().__init__(repository)
        self.faculty_service = faculty_service
        self.program_service = program_service
        self.status_service = status_service

    @classmethod
    def from_db(cls, db):
        return cls(
            StudentRepository(db),
            FacultyService.from_db(db),
            ProgramService.from_db(db),
            StudentStatusService.from_db(db),
        )

    async def create(self, data: dict) -> dict:
        async with self._operation("create"):
            await self._validate_student_code(data.get("ma_so_sinh_vien"))
            await self._validate_contacts(data.get("email"), data.get("so_dien_thoai"))
            await self._validate_references(data)
            return await self.repository.create(data)

    async def get(self, pagination: Pagination, search: Optional[str] = None, faculty: Optional[str] = None):
        return await super().get(pagination, keyword=search, filters={"khoa": faculty})

    async def update(self, id: str, data: dict) -> dict:
        async with self._operation("update"):
            current = await self._require(id)
            if not data:
                return current
            if data.get("ma_so_sinh_vien"):
                await self._validate_student_code(data["ma_so_sinh_vien"], exclude_id=id)
            if data.get("email") or data.get("so_dien_thoai"):
                await self._validate_contacts(data.get("email"), data.get("so_dien_thoai"), exclude_id=id)
            await self._validate_references(data)
            if data.get("tinh_trang"):
                await self._validate_status_change(current, data["tinh_trang"])
            record = await self.repository.update(id, data)
            if record is None:
                raise self.not_found(id)
            return record

    async def _validate_student_code(self, code: Optional[str], exclude_id: Optional[str] = None):
        if code and await self.repository.find_by_code(code, exclude_id=exclude_id):
            raise StudentIdExistsException(code)

    async def _validate_contacts(self, email, phone, exclude_id: Optional[str] = None):
        if not email and not phone:
            return
        if await self.repository.find_by_email_or_phone(email, phone, exclude_id=exclude_id):
            raise StudentExistsException(email, phone)

    async def _exists(self, service, id) -> bool:
        if not is_valid_object_id(id):
            return False
        return await service.repository.detail(id) is not None

    async def _validate_references(self, data: dict):
        if data.get("khoa") and not await self._exists(self.faculty_service, data["khoa"]):
            raise FacultyNotExistsException(data["khoa"])
        if data.get("chuong_trinh") and not await self._exists(self.program_service, data["chuong_trinh"]):
            raise ProgramNotExistsException(data["chuong_trinh"])
        if data.get("tinh_trang") and not await self._exists(self.status_service, data["tinh_trang"]):
            raise StudentStatusNotExistsException(data["tinh_trang"])

    async def _validate_status_change(self, student: dict, new_status_id: str):
        current_id = student.get("tinh_trang")
        if not current_id or str(current_id) == str(new_status_id):
            return
        current = await self.status_service.repository.detail(current_id) if is_valid_object_id(current_id) else None
        target = await self.status_service.repository.detail(new_status_id)
        current_name, target_name = status_name(current), status_name(target)
        # Unknown current status: nothing to check against.
        if current_name is None or current_name not in STATUS_TRANSITIONS:
            return
        if target_name not in STATUS_TRANSITIONS[current_name]:
            raise InvalidStatusTransitionException(current_name, target_name)

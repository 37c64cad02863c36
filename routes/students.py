# routes/students.py
from typing import Optional

from fastapi import APIRouter, Depends

from common.pagination import Pagination
from common.utils import serialize
from database import get_db
from models.student import StudentCreate, StudentUpdate
from services.student import StudentService

router = APIRouter(prefix="/students", tags=["students"])


def get_service(db=Depends(get_db)) -> StudentService:
    return StudentService.from_db(db)


@router.post("/", status_code=201)
async def create_student(student: StudentCreate, service: StudentService = Depends(get_service)):
    created = await service.create(student.model_dump(exclude_none=True))
    return serialize(created)


@router.get("/")
async def get_students(
    page: int = 1,
    limit: int = 10,
    searchString: Optional[str] = None,
    faculty: Optional[str] = None,
    service: StudentService = Depends(get_service),
):
    result = await service.get(Pagination(page, limit), search=searchString, faculty=faculty)
    return result.to_dict()


@router.get("/all")
async def get_all_students(service: StudentService = Depends(get_service)):
    return serialize(await service.get_all())


@router.get("/{id}")
async def get_student(id: str, service: StudentService = Depends(get_service)):
    return serialize(await service.get_by_id(id))


@router.patch("/{id}")
async def update_student(id: str, student: StudentUpdate, service: StudentService = Depends(get_service)):
    updated = await service.update(id, student.model_dump(exclude_unset=True, exclude_none=True))
    return serialize(updated)


@router.delete("/{id}")
async def delete_student(id: str, service: StudentService = Depends(get_service)):
    return serialize(await service.delete(id))

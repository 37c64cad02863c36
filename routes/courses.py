# routes/courses.py
from typing import Optional

from fastapi import APIRouter, Depends

from common.pagination import Pagination
from common.utils import serialize
from database import get_db
from models.course import CourseCreate, CourseUpdate
from services.course import CourseService

router = APIRouter(prefix="/courses", tags=["courses"])


def get_service(db=Depends(get_db)) -> CourseService:
    return CourseService.from_db(db)


@router.post("/", status_code=201)
async def create_course(course: CourseCreate, service: CourseService = Depends(get_service)):
    return serialize(await service.create(course.model_dump(exclude_none=True)))


@router.get("/")
async def get_courses(
    page: int = 1,
    limit: int = 10,
    searchString: Optional[str] = None,
    faculty: Optional[str] = None,
    available: Optional[str] = None,
    service: CourseService = Depends(get_service),
):
    """List courses; ``available=true`` hides disabled courses, ``false`` shows only those."""
    result = await service.get(Pagination(page, limit), search=searchString, faculty=faculty, available=available)
    return result.to_dict()


@router.get("/all")
async def get_all_courses(service: CourseService = Depends(get_service)):
    return serialize(await service.get_all())


@router.get("/available")
async def get_available_courses(service: CourseService = Depends(get_service)):
    return serialize(await service.get_all_available())


@router.get("/{id}")
async def get_course(id: str, service: CourseService = Depends(get_service)):
    return serialize(await service.get_by_id(id))


@router.patch("/{id}")
async def update_course(id: str, course: CourseUpdate, service: CourseService = Depends(get_service)):
    return serialize(await service.update(id, course.model_dump(exclude_unset=True, exclude_none=True)))


@router.delete("/{id}")
async def delete_course(id: str, service: CourseService = Depends(get_service)):
    return serialize(await service.delete(id))

# routes/enrollments.py
from typing import Optional

from fastapi import APIRouter, Depends

from common.pagination import Pagination
from common.utils import serialize
from database import get_db
from models.enrollment import EnrollmentCreate
from services.enrollment import EnrollmentService

router = APIRouter(prefix="/enrollments", tags=["enrollments"])


def get_service(db=Depends(get_db)) -> EnrollmentService:
    return EnrollmentService.from_db(db)


@router.post("/", status_code=201)
async def register(enrollment: EnrollmentCreate, service: EnrollmentService = Depends(get_service)):
    """Create the enrollment, or refresh the active one for the same student, course and class."""
    return serialize(await service.upsert(enrollment.model_dump(exclude_none=True)))


@router.get("/")
async def get_enrollments(
    page: int = 1,
    limit: int = 10,
    ma_sv: Optional[str] = None,
    ma_mon: Optional[str] = None,
    ma_lop: Optional[str] = None,
    service: EnrollmentService = Depends(get_service),
):
    filters = {"ma_sv": ma_sv, "ma_mon": ma_mon, "ma_lop": ma_lop}
    result = await service.get(Pagination(page, limit), filters=filters)
    return result.to_dict()


@router.get("/all")
async def get_all_enrollments(service: EnrollmentService = Depends(get_service)):
    return serialize(await service.get_all())


@router.get("/student/{student_id}")
async def get_student_enrollments(student_id: str, service: EnrollmentService = Depends(get_service)):
    return serialize(await service.get_by_student_id(student_id))


@router.delete("/course/{course_id}")
async def cancel_course_enrollments(course_id: str, service: EnrollmentService = Depends(get_service)):
    return await service.delete_by_course_id(course_id)


@router.get("/{id}")
async def get_enrollment(id: str, service: EnrollmentService = Depends(get_service)):
    return serialize(await service.get_by_id(id))


@router.delete("/{id}")
async def cancel_enrollment(id: str, service: EnrollmentService = Depends(get_service)):
    return serialize(await service.delete(id))

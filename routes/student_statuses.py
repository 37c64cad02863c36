# routes/student_statuses.py
from typing import Optional

from fastapi import APIRouter, Depends

from common.pagination import Pagination
from common.utils import serialize
from database import get_db
from models.student_status import StudentStatusCreate, StudentStatusUpdate
from services.student_status import StudentStatusService

router = APIRouter(prefix="/student-statuses", tags=["student-statuses"])


def get_service(db=Depends(get_db)) -> StudentStatusService:
    return StudentStatusService.from_db(db)


@router.post("/", status_code=201)
async def create_student_status(payload: StudentStatusCreate, service: StudentStatusService = Depends(get_service)):
    return serialize(await service.create(payload.model_dump(exclude_none=True)))


@router.get("/")
async def get_student_statuses(
    page: int = 1,
    limit: int = 10,
    searchString: Optional[str] = None,
    service: StudentStatusService = Depends(get_service),
):
    result = await service.get(Pagination(page, limit), keyword=searchString)
    return result.to_dict()


@router.get("/all")
async def get_all_student_statuses(service: StudentStatusService = Depends(get_service)):
    return serialize(await service.get_all())


@router.get("/{id}")
async def get_student_status(id: str, service: StudentStatusService = Depends(get_service)):
    return serialize(await service.get_by_id(id))


@router.patch("/{id}")
async def update_student_status(id: str, payload: StudentStatusUpdate, service: StudentStatusService = Depends(get_service)):
    return serialize(await service.update(id, payload.model_dump(exclude_unset=True, exclude_none=True)))


@router.delete("/{id}")
async def delete_student_status(id: str, service: StudentStatusService = Depends(get_service)):
    return serialize(await service.delete(id))

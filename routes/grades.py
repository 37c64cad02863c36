# routes/grades.py
from typing import Optional

from fastapi import APIRouter, Depends

from common.pagination import Pagination
from common.utils import serialize
from database import get_db
from models.grade import GradeCreate, GradeUpdate
from services.grade import GradeService

router = APIRouter(prefix="/grades", tags=["grades"])


def get_service(db=Depends(get_db)) -> GradeService:
    return GradeService.from_db(db)


@router.post("/", status_code=201)
async def create_grade(payload: GradeCreate, service: GradeService = Depends(get_service)):
    return serialize(await service.create(payload.model_dump(exclude_none=True)))


@router.get("/")
async def get_grades(
    page: int = 1,
    limit: int = 10,
    searchString: Optional[str] = None,
    service: GradeService = Depends(get_service),
):
    result = await service.get(Pagination(page, limit), keyword=searchString)
    return result.to_dict()


@router.get("/all")
async def get_all_grades(service: GradeService = Depends(get_service)):
    return serialize(await service.get_all())


@router.get("/{id}")
async def get_grade(id: str, service: GradeService = Depends(get_service)):
    return serialize(await service.get_by_id(id))


@router.patch("/{id}")
async def update_grade(id: str, payload: GradeUpdate, service: GradeService = Depends(get_service)):
    return serialize(await service.update(id, payload.model_dump(exclude_unset=True, exclude_none=True)))


@router.delete("/{id}")
async def delete_grade(id: str, service: GradeService = Depends(get_service)):
    return serialize(await service.delete(id))

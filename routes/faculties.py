# routes/faculties.py
from typing import Optional

from fastapi import APIRouter, Depends

from common.pagination import Pagination
from common.utils import serialize
from database import get_db
from models.faculty import FacultyCreate, FacultyUpdate
from services.faculty import FacultyService

router = APIRouter(prefix="/faculties", tags=["faculties"])


def get_service(db=Depends(get_db)) -> FacultyService:
    return FacultyService.from_db(db)


@router.post("/", status_code=201)
async def create_faculty(payload: FacultyCreate, service: FacultyService = Depends(get_service)):
    return serialize(await service.create(payload.model_dump(exclude_none=True)))


@router.get("/")
async def get_faculties(
    page: int = 1,
    limit: int = 10,
    searchString: Optional[str] = None,
    service: FacultyService = Depends(get_service),
):
    result = await service.get(Pagination(page, limit), keyword=searchString)
    return result.to_dict()


@router.get("/all")
async def get_all_faculties(service: FacultyService = Depends(get_service)):
    return serialize(await service.get_all())


@router.get("/{id}")
async def get_faculty(id: str, service: FacultyService = Depends(get_service)):
    return serialize(await service.get_by_id(id))


@router.patch("/{id}")
async def update_faculty(id: str, payload: FacultyUpdate, service: FacultyService = Depends(get_service)):
    return serialize(await service.update(id, payload.model_dump(exclude_unset=True, exclude_none=True)))


@router.delete("/{id}")
async def delete_faculty(id: str, service: FacultyService = Depends(get_service)):
    return serialize(await service.delete(id))

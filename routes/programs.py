# routes/programs.py
from typing import Optional

from fastapi import APIRouter, Depends

from common.pagination import Pagination
from common.utils import serialize
from database import get_db
from models.program import ProgramCreate, ProgramUpdate
from services.program import ProgramService

router = APIRouter(prefix="/programs", tags=["programs"])


def get_service(db=Depends(get_db)) -> ProgramService:
    return ProgramService.from_db(db)


@router.post("/", status_code=201)
async def create_program(payload: ProgramCreate, service: ProgramService = Depends(get_service)):
    return serialize(await service.create(payload.model_dump(exclude_none=True)))


@router.get("/")
async def get_programs(
    page: int = 1,
    limit: int = 10,
    searchString: Optional[str] = None,
    service: ProgramService = Depends(get_service),
):
    result = await service.get(Pagination(page, limit), keyword=searchString)
    return result.to_dict()


@router.get("/all")
async def get_all_programs(service: ProgramService = Depends(get_service)):
    return serialize(await service.get_all())


@router.get("/{id}")
async def get_program(id: str, service: ProgramService = Depends(get_service)):
    return serialize(await service.get_by_id(id))


@router.patch("/{id}")
async def update_program(id: str, payload: ProgramUpdate, service: ProgramService = Depends(get_service)):
    return serialize(await service.update(id, payload.model_dump(exclude_unset=True, exclude_none=True)))


@router.delete("/{id}")
async def delete_program(id: str, service: ProgramService = Depends(get_service)):
    return serialize(await service.delete(id))

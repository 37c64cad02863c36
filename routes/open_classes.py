# routes/open_classes.py
from typing import Optional

from fastapi import APIRouter, Depends

from common.pagination import Pagination
from common.utils import serialize
from database import get_db
from models.open_class import OpenClassCreate, OpenClassUpdate
from services.open_class import OpenClassService

router = APIRouter(prefix="/open-classes", tags=["open-classes"])


def get_service(db=Depends(get_db)) -> OpenClassService:
    return OpenClassService.from_db(db)


@router.post("/", status_code=201)
async def create_open_class(open_class: OpenClassCreate, service: OpenClassService = Depends(get_service)):
    return serialize(await service.create(open_class.model_dump(exclude_none=True)))


@router.get("/")
async def get_open_classes(
    page: int = 1,
    limit: int = 10,
    keyword: Optional[str] = None,
    nam_hoc: Optional[int] = None,
    hoc_ky: Optional[int] = None,
    ma_mon_hoc: Optional[str] = None,
    giang_vien: Optional[str] = None,
    service: OpenClassService = Depends(get_service),
):
    result = await service.get(
        Pagination(page, limit),
        keyword=keyword,
        nam_hoc=nam_hoc,
        hoc_ky=hoc_ky,
        ma_mon_hoc=ma_mon_hoc,
        giang_vien=giang_vien,
    )
    return result.to_dict()


@router.get("/all")
async def get_all_open_classes(service: OpenClassService = Depends(get_service)):
    return serialize(await service.get_all())


@router.get("/{id}")
async def get_open_class(id: str, service: OpenClassService = Depends(get_service)):
    return serialize(await service.get_by_id(id))


@router.patch("/{id}")
async def update_open_class(id: str, open_class: OpenClassUpdate, service: OpenClassService = Depends(get_service)):
    return serialize(await service.update(id, open_class.model_dump(exclude_unset=True, exclude_none=True)))


@router.delete("/{id}")
async def delete_open_class(id: str, service: OpenClassService = Depends(get_service)):
    return serialize(await service.delete(id))

# services/open_class.py
from typing import Optional

from common.pagination import Pagination
from repositories.open_class import OpenClassRepository
from services.base import BaseService
from services.exceptions import OpenClassCapacityException, OpenClassConflictException, OpenClassNotFoundException


class OpenClassService(BaseService):
    name = "open_class"
    not_found = OpenClassNotFoundException

    @classmethod
    def from_db(cls, db):
        return cls(OpenClassRepository(db))

    async def create(self, data: dict) -> dict:
        async with self._operation("create"):
            await self._validate_code(data.get("ma_lop"))
            self._validate_capacity(data.get("si_so"), data.get("so_luong_toi_da"))
            return await self.repository.create(data)

    async def update(self, id: str, data: dict) -> dict:
        async with self._operation("update"):
            current = await self._require(id)
            if not data:
                return current
            await self._validate_code(data.get("ma_lop"), exclude_id=id)
            self._validate_capacity(
                data.get("si_so", current.get("si_so")),
                data.get("so_luong_toi_da", current.get("so_luong_toi_da")),
            )
            record = await self.repository.update(id, data)
            if record is None:
                raise self.not_found(id)
            return record

    async def get(
        self,
        pagination: Pagination,
        keyword: Optional[str] = None,
        nam_hoc: Optional[int] = None,
        hoc_ky: Optional[int] = None,
        ma_mon_hoc: Optional[str] = None,
        giang_vien: Optional[str] = None,
    ):
        return await super().get(
            pagination,
            keyword=keyword,
            filters={"nam_hoc": nam_hoc, "hoc_ky": hoc_ky, "ma_mon_hoc": ma_mon_hoc},
            regex_filters={"giang_vien": giang_vien},
        )

    async def _validate_code(self, code: Optional[str], exclude_id: Optional[str] = None):
        if code and await self.repository.find_by_code(code, exclude_id=exclude_id):
            raise OpenClassConflictException(code)

    @staticmethod
    def _validate_capacity(enrolled, capacity):
        if enrolled is not None and capacity is not None and enrolled > capacity:
            raise OpenClassCapacityException(enrolled, capacity)

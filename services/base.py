# services/base.py
import logging
from contextlib import asynccontextmanager
from typing import Dict, List, Optional

from common.exceptions import AppException, NotFoundException
from common.pagination import Pagination, PaginatedResponse
from common.utils import is_valid_object_id

logger = logging.getLogger(__name__)


class BaseService:
    """Business layer over one repository.

    Ids are checked for ObjectId format before the store is queried, and a
    missing record is always raised as ``not_found``. Every failure is logged
    as ``<name>.service.<operation>: <message>`` before it propagates.
    """

    name = "record"
    not_found = NotFoundException

    def __init__(self, repository):
        self.repository = repository

    @asynccontextmanager
    async def _operation(self, operation: str):
        try:
            yield
        except AppException as e:
            logger.error(f"{self.name}.service.{operation}: {e.message}")
            raise

    def _check_id(self, id: str):
        if not is_valid_object_id(id):
            raise self.not_found(id, invalid_id=True)

    async def _require(self, id: str) -> dict:
        self._check_id(id)
        record = await self.repository.get_by_id(id)
        if record is None:
            raise self.not_found(id)
        return record

    async def create(self, data: dict) -> dict:
        async with self._operation("create"):
            return await self.repository.create(data)

    async def get(
        self,
        pagination: Pagination,
        keyword: Optional[str] = None,
        filters: Optional[Dict] = None,
        regex_filters: Optional[Dict] = None,
    ) -> PaginatedResponse:
        async with self._operation("get"):
            return await self.repository.find_all(pagination, keyword, filters, regex_filters)

    async def get_all(self, filters: Optional[Dict] = None) -> List[dict]:
        async with self._operation("get_all"):
            return await self.repository.get_all(filters)

    async def detail(self, id: str) -> dict:
        async with self._operation("detail"):
            return await self._require(id)

    get_by_id = detail

    async def find_by_code(self, code: str) -> Optional[dict]:
        async with self._operation("find_by_code"):
            return await self.repository.find_by_code(code)

    async def update(self, id: str, data: dict) -> dict:
        async with self._operation("update"):
            self._check_id(id)
            record = await self.repository.update(id, data)
            if record is None:
                raise self.not_found(id)
            return record

    async def delete(self, id: str) -> dict:
        async with self._operation("delete"):
            self._check_id(id)
            record = await self.repository.soft_delete(id)
            if record is None:
                raise self.not_found(id)
            return record

# services/import_service.py
import io
import logging
import os
from typing import List

import pandas as pd
from pydantic import ValidationError

from common.exceptions import AppException, ValidationException
from common.student_transformer import StudentTransformer
from models.student import StudentCreate
from services.student import StudentService

logger = logging.getLogger(__name__)

CSV_EXTENSIONS = (".csv",)
EXCEL_EXTENSIONS = (".xlsx",)


def _describe(error: Exception) -> str:
    if isinstance(error, ValidationError):
        return "; ".join(
            f"{'.'.join(str(part) for part in item['loc'])}: {item['msg']}" for item in error.errors()
        )
    if isinstance(error, AppException):
        return error.message
    return str(error)


class ImportService:
    """Loads students from uploaded CSV or Excel files.

    Each row is upserted by ``ma_so_sinh_vien``. A failing row is recorded in
    ``errors`` and the import carries on with the next one.
    """

    def __init__(self, student_service: StudentService):
        self.student_service = student_service

    @classmethod
    def from_db(cls, db):
        return cls(StudentService.from_db(db))

    async def _read(self, file, extensions) -> bytes:
        if file is None or not file.filename:
            raise ValidationException("File is required", "FILE_REQUIRED")
        extension = os.path.splitext(file.filename)[1].lower()
        if extension not in extensions:
            raise ValidationException(
                f"Unsupported file type '{extension}', expected {', '.join(extensions)}",
                "INVALID_FILE_TYPE",
                details={"filename": file.filename},
            )
        content = await file.read()
        if not content:
            raise ValidationException("Uploaded file is empty", "EMPTY_FILE", details={"filename": file.filename})
        return content

    async def import_csv(self, file) -> dict:
        content = await self._read(file, CSV_EXTENSIONS)
        try:
            frame = pd.read_csv(io.BytesIO(content), dtype=str, keep_default_na=False, encoding="utf-8-sig")
        except (ValueError, UnicodeDecodeError) as e:
            logger.error(f"import.service.import_csv: cannot parse {file.filename}: {e}")
            raise ValidationException(f"Cannot read CSV file: {e}", "INVALID_FILE")
        logger.info(f"Parsed {len(frame)} records from CSV file {file.filename}")
        return await self._import_rows(frame.to_dict(orient="records"))

    async def import_excel(self, file) -> dict:
        content = await self._read(file, EXCEL_EXTENSIONS)
        try:
            frame = pd.read_excel(io.BytesIO(content), dtype=str).fillna("")
        except (ValueError, KeyError) as e:
            logger.error(f"import.service.import_excel: cannot parse {file.filename}: {e}")
            raise ValidationException(f"Cannot read Excel file: {e}", "INVALID_FILE")
        logger.info(f"Parsed {len(frame)} records from Excel file {file.filename}")
        return await self._import_rows(frame.to_dict(orient="records"))

    async def _import_rows(self, rows: List[dict]) -> dict:
        imported = 0
        errors = []
        for index, record in enumerate(rows):
            try:
                await self._upsert_row(record)
                imported += 1
            except (AppException, ValueError) as e:
                # Row 1 of the sheet is the header.
                logger.error(f"import.service.import_row: row {index + 2}: {_describe(e)}")
                errors.append({"row": index + 2, "record": record, "error": _describe(e)})
        logger.info(f"Imported {imported} of {len(rows)} students, {len(errors)} errors")
        return {"success": True, "imported": imported, "errors": errors}

    async def _upsert_row(self, record: dict) -> dict:
        service = self.student_service
        data = await StudentTransformer.from_row(
            record, service.faculty_service, service.program_service, service.status_service
        )
        if not data.get("ma_so_sinh_vien"):
            raise ValidationException("Mã số sinh viên is required", "STUDENT_ID_REQUIRED")
        student = StudentCreate(**data).model_dump(exclude_none=True)
        existing = await service.find_by_code(student["ma_so_sinh_vien"])
        if existing:
            return await service.update(str(existing["_id"]), student)
        return await service.create(student)

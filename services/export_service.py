# services/export_service.py
import logging
import os
from datetime import datetime

import pandas as pd

from common.student_transformer import COLUMNS, StudentTransformer
from config import settings
from services.student import StudentService

logger = logging.getLogger(__name__)

EXCEL_MEDIA_TYPE = "application/vnd.openxmlformats-officedocument.spreadsheetml.sheet"
CSV_MEDIA_TYPE = "text/csv"


class ExportService:
    def __init__(self, student_service: StudentService, export_dir: str = None):
        self.student_service = student_service
        self.export_dir = export_dir or settings.export_dir

    @classmethod
    def from_db(cls, db):
        return cls(StudentService.from_db(db))

    async def _frame(self) -> pd.DataFrame:
        service = self.student_service
        students = await service.get_all()
        faculties = {str(f["_id"]): f for f in await service.faculty_service.get_all()}
        programs = {str(p["_id"]): p for p in await service.program_service.get_all()}
        statuses = {str(s["_id"]): s for s in await service.status_service.get_all()}
        rows = [StudentTransformer.to_row(s, faculties, programs, statuses) for s in students]
        logger.info(f"Exporting {len(rows)} students")
        return pd.DataFrame(rows, columns=list(COLUMNS))

    def _target(self, extension: str):
        os.makedirs(self.export_dir, exist_ok=True)
        stamp = datetime.utcnow().strftime("%Y-%m-%dT%H-%M-%S-%f")
        file_name = f"student_export_{stamp}.{extension}"
        return os.path.join(self.export_dir, file_name), file_name

    async def export_students_to_excel(self) -> dict:
        frame = await self._frame()
        file_path, file_name = self._target("xlsx")
        with pd.ExcelWriter(file_path, engine="openpyxl") as writer:
            frame.to_excel(writer, sheet_name="Students", index=False)
        logger.info(f"Excel file created at: {file_path}")
        return {"file_path": file_path, "file_name": file_name, "media_type": EXCEL_MEDIA_TYPE}

    async def export_students_to_csv(self) -> dict:
        frame = await self._frame()
        file_path, file_name = self._target("csv")
        # BOM so spreadsheet tools detect UTF-8.
        frame.to_csv(file_path, index=False, encoding="utf-8-sig")
        logger.info(f"CSV file created at: {file_path}")
        return {"file_path": file_path, "file_name": file_name, "media_type": CSV_MEDIA_TYPE}

# routes/import_export.py
from fastapi import APIRouter, Depends, File, UploadFile
from fastapi.responses import FileResponse

from database import get_db
from services.export_service import ExportService
from services.import_service import ImportService

router = APIRouter(tags=["import-export"])


def get_import_service(db=Depends(get_db)) -> ImportService:
    return ImportService.from_db(db)


def get_export_service(db=Depends(get_db)) -> ExportService:
    return ExportService.from_db(db)


@router.post("/import/csv")
async def import_csv(file: UploadFile = File(...), service: ImportService = Depends(get_import_service)):
    return await service.import_csv(file)


@router.post("/import/excel")
async def import_excel(file: UploadFile = File(...), service: ImportService = Depends(get_import_service)):
    return await service.import_excel(file)


def _download(export: dict) -> FileResponse:
    return FileResponse(export["file_path"], media_type=export["media_type"], filename=export["file_name"])


@router.get("/export/students/excel")
async def export_students_excel(service: ExportService = Depends(get_export_service)):
    return _download(await service.export_students_to_excel())


@router.get("/export/students/csv")
async def export_students_csv(service: ExportService = Depends(get_export_service)):
    return _download(await service.export_students_to_csv())

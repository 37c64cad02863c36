# routes/transcripts.py
from typing import Optional

from fastapi import APIRouter, Depends

from common.pagination import Pagination
from common.utils import serialize
from database import get_db
from models.transcript import TranscriptCreate, TranscriptUpdate
from services.transcript import TranscriptService

router = APIRouter(prefix="/transcripts", tags=["transcripts"])


def get_service(db=Depends(get_db)) -> TranscriptService:
    return TranscriptService.from_db(db)


@router.post("/", status_code=201)
async def create_transcript(transcript: TranscriptCreate, service: TranscriptService = Depends(get_service)):
    return serialize(await service.create(transcript.model_dump(exclude_none=True)))


@router.get("/")
async def get_transcripts(
    page: int = 1,
    limit: int = 10,
    searchString: Optional[str] = None,
    nam_hoc: Optional[int] = None,
    hoc_ky: Optional[int] = None,
    service: TranscriptService = Depends(get_service),
):
    result = await service.get(Pagination(page, limit), search=searchString, nam_hoc=nam_hoc, hoc_ky=hoc_ky)
    return result.to_dict()


@router.get("/all")
async def get_all_transcripts(service: TranscriptService = Depends(get_service)):
    return serialize(await service.get_all())


@router.get("/student/{student_id}")
async def get_student_transcripts(student_id: str, service: TranscriptService = Depends(get_service)):
    return serialize(await service.get_by_student_id(student_id))


@router.get("/course/{course_id}")
async def get_course_transcripts(course_id: str, service: TranscriptService = Depends(get_service)):
    return serialize(await service.get_by_course_id(course_id))


@router.get("/{id}")
async def get_transcript(id: str, service: TranscriptService = Depends(get_service)):
    return serialize(await service.get_by_id(id))


@router.patch("/{id}")
async def update_transcript(id: str, transcript: TranscriptUpdate, service: TranscriptService = Depends(get_service)):
    return serialize(await service.update(id, transcript.model_dump(exclude_unset=True, exclude_none=True)))


@router.delete("/{id}")
async def delete_transcript(id: str, service: TranscriptService = Depends(get_service)):
    return serialize(await service.delete(id))

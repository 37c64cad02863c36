# main.py
import sys
import os
import logging
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

sys.path.append(os.path.dirname(os.path.abspath(__file__)))

from config import settings
from database import init_db
from common.error_handlers import register_exception_handlers, register_request_logging
from routes import (
    courses,
    enrollments,
    faculties,
    grades,
    import_export,
    open_classes,
    programs,
    student_statuses,
    students,
    transcripts,
)

logging.basicConfig(level=settings.log_level, format="%(asctime)s %(levelname)s %(name)s: %(message)s")
logger = logging.getLogger(__name__)

app = FastAPI(title="Student Records API")

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

register_request_logging(app)
register_exception_handlers(app)

app.include_router(students.router, prefix=settings.api_prefix)
app.include_router(faculties.router, prefix=settings.api_prefix)
app.include_router(programs.router, prefix=settings.api_prefix)
app.include_router(student_statuses.router, prefix=settings.api_prefix)
app.include_router(courses.router, prefix=settings.api_prefix)
app.include_router(open_classes.router, prefix=settings.api_prefix)
app.include_router(enrollments.router, prefix=settings.api_prefix)
app.include_router(grades.router, prefix=settings.api_prefix)
app.include_router(transcripts.router, prefix=settings.api_prefix)
app.include_router(import_export.router, prefix=settings.api_prefix)


@app.get("/health")
async def health():
    return {"status": "ok", "env": settings.env}


@app.on_event("startup")
async def startup_event():
    logger.info(f"Starting in {settings.env} mode, API mounted at {settings.api_prefix}")
    await init_db()

if __name__ == "__main__":
    import uvicorn
    uvicorn.run("main:app", host="127.0.0.1", port=8000, reload=True)

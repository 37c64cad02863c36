# database.py
import logging
from motor.motor_asyncio import AsyncIOMotorClient
from pymongo import ASCENDING

from config import settings

logger = logging.getLogger(__name__)

client = AsyncIOMotorClient(settings.mongodb_uri)
db = client[settings.mongodb_db]


def get_db():
    """FastAPI dependency returning the application database."""
    return db


async def init_db(database=None):
    database = database if database is not None else db
    logger.info("Ensuring indexes")
    await database.students.create_index("ma_so_sinh_vien")
    await database.faculties.create_index("ma_khoa")
    await database.programs.create_index("ma")
    await database.courses.create_index("ma_mon_hoc", unique=True)
    await database.open_classes.create_index("ma_lop")
    await database.enrollments.create_index(
        [("ma_sv", ASCENDING), ("ma_mon", ASCENDING), ("ma_lop", ASCENDING)]
    )
    await database.transcripts.create_index("ma_so_sinh_vien")

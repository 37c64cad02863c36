# repositories/program.py
from repositories.base import BaseRepository


class ProgramRepository(BaseRepository):
    collection_name = "programs"
    entity = "PROGRAM"
    search_fields = ("ma", "name.vi", "name.en")
    code_field = "ma"

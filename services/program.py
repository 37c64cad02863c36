# services/program.py
from repositories.program import ProgramRepository
from services.base import BaseService
from services.exceptions import ProgramNotFoundException


class ProgramService(BaseService):
    name = "program"
    not_found = ProgramNotFoundException

    @classmethod
    def from_db(cls, db):
        return cls(ProgramRepository(db))

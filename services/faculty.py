# services/faculty.py
from repositories.faculty import FacultyRepository
from services.base import BaseService
from services.exceptions import FacultyNotFoundException


class FacultyService(BaseService):
    name = "faculty"
    not_found = FacultyNotFoundException

    @classmethod
    def from_db(cls, db):
        return cls(FacultyRepository(db))

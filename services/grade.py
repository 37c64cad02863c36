# services/grade.py
from repositories.grade import GradeRepository
from services.base import BaseService
from services.exceptions import GradeNotFoundException


class GradeService(BaseService):
    name = "grade"
    not_found = GradeNotFoundException

    @classmethod
    def from_db(cls, db):
        return cls(GradeRepository(db))

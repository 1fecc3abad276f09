from ..schemas import StudentSchema
from ..validators import validate_student
from .crud import crud_blueprint


def create_blueprint(repo):
    return crud_blueprint("students", repo, StudentSchema(), validate_student, "Student")

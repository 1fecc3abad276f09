from ..schemas import CourseSchema
from ..validators import validate_course
from .crud import crud_blueprint


def create_blueprint(repo):
    return crud_blueprint("courses", repo, CourseSchema(), validate_course, "Course")

import re
from typing import NamedTuple

from .errors import CourseNotFound, InvalidInput
from .models import Course

STUDENT_ID_PATTERN = re.compile(r'[0-9]{4}-[0-9]{4}')
REQUIRED_FIELDS = ('studentName', 'studentId', 'courseCode', 'semester')


class EnrollmentRequest(NamedTuple):
    student_name: str
    student_id: str
    course: Course
    semester: str
    reason: str


def validate_enrollment(form, store):
    """
    Checks a submitted enrollment form and returns the cleaned fields.
    Raises InvalidInput or CourseNotFound; nothing is partially accepted.
    """
    fields = {name: (form.get(name) or '').strip() for name in REQUIRED_FIELDS}

    missing = [name for name, value in fields.items() if not value]
    if missing:
        raise InvalidInput(f"Missing required fields: {', '.join(missing)}")

    if not STUDENT_ID_PATTERN.fullmatch(fields['studentId']):
        raise InvalidInput("Student ID must look like 1234-5678.")

    course = store.find_course_by_code(fields['courseCode'])
    if course is None:
        raise CourseNotFound(f"No course with code {fields['courseCode']}.")

    return EnrollmentRequest(
        student_name=fields['studentName'],
        student_id=fields['studentId'],
        course=course,
        semester=fields['semester'],
        reason=(form.get('reason') or '').strip(),
    )

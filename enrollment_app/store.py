import threading

from flask import current_app
from markupsafe import escape

from .models import Enrollment

# Largest value an SQLite INTEGER column can hold
MAX_ENROLLMENT_ID = 2 ** 63 - 1


class EnrollmentStore:
    """Owns the read-only course catalog and the enrollment table.

    One instance is created per application by ``create_app`` and lives in
    ``app.extensions``. Writes go through a single lock so the id counter and
    the table cannot be corrupted by concurrent requests.
    """

    def __init__(self, db, catalog):
        self.db = db
        self._catalog = tuple(catalog)
        self._courses_by_code = {course.code: course for course in self._catalog}
        self._lock = threading.Lock()

    # --- CATALOG ---

    def list_courses(self):
        return list(self._catalog)

    def find_course_by_code(self, code):
        return self._courses_by_code.get(code)

    # --- ENROLLMENTS ---

    def list_enrollments(self):
        return Enrollment.query.order_by(Enrollment.id).all()

    def add_enrollment(self, student_name, student_id, course, semester, reason=''):
        """Create and return a new enrollment for ``course``.

        User supplied text is escaped here, before it is stored.
        """
        enrollment = Enrollment(
            student_name=escape(student_name),
            student_id=escape(student_id),
            course_code=escape(course.code),
            course_name=escape(course.name),
            semester=escape(semester),
            reason=escape(reason or ''),
        )
        with self._lock:
            self.db.session.add(enrollment)
            try:
                self.db.session.commit()
            except Exception:
                self.db.session.rollback()
                raise
        return enrollment

    def remove_enrollment(self, enrollment_id):
        if not 0 < enrollment_id <= MAX_ENROLLMENT_ID:
            return False
        with self._lock:
            enrollment = self.db.session.get(Enrollment, enrollment_id)
            if enrollment is None:
                return False
            self.db.session.delete(enrollment)
            self.db.session.commit()
        return True


def get_store():
    """Return the store attached to the running application."""
    return current_app.extensions['enrollment_store']

from dataclasses import dataclass
from datetime import datetime

from markupsafe import Markup, escape
from sqlalchemy import String
from sqlalchemy.types import TypeDecorator

from . import db  # Imports the db object from our __init__.py file


class EscapedText(TypeDecorator):
    """Text column holding HTML-escaped user input.

    Values are escaped on the way in (a no-op for values that are already
    ``Markup``) and come back as ``Markup`` so templates emit them as-is.
    """

    impl = String
    cache_ok = True

    def process_bind_param(self, value, dialect):
        if value is None:
            return None
        return str(escape(value))

    def process_result_value(self, value, dialect):
        if value is None:
            return None
        return Markup(value)


# --- STATIC CATALOG ---
@dataclass(frozen=True)
class Course:
    code: str
    name: str
    instructor: str
    credits: int
    capacity: int


COURSE_CATALOG = (
    Course("CS401", "Advanced Web Development", "Dr. Smith", 3, 30),
    Course("CS402", "Database Systems", "Dr. Patel", 3, 35),
    Course("CS403", "Software Engineering", "Dr. Lee", 3, 40),
    Course("CS404", "Computer Networks", "Dr. Zhao", 3, 30),
    Course("CS405", "Artificial Intelligence", "Dr. Gomez", 3, 25),
)


# --- DATABASE MODEL ---
class Enrollment(db.Model):
    # AUTOINCREMENT keeps SQLite from handing out the id of a removed row again
    __table_args__ = {'sqlite_autoincrement': True}

    id = db.Column(db.Integer, primary_key=True)
    student_name = db.Column(EscapedText(200), nullable=False)
    student_id = db.Column(EscapedText(20), nullable=False)
    course_code = db.Column(EscapedText(20), nullable=False)
    # Snapshot of the course name at enrollment time
    course_name = db.Column(EscapedText(200), nullable=False)
    semester = db.Column(EscapedText(100), nullable=False)
    reason = db.Column(EscapedText(2000), nullable=False, default='')
    # Local time, set when the row is created
    enrollment_date = db.Column(db.DateTime, default=datetime.now)

    def __repr__(self):
        return f'<Enrollment {self.student_id} in Course {self.course_code}>'

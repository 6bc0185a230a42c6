from flask import Blueprint, current_app, render_template, request, redirect, url_for

from .store import get_store
from .validation import validate_enrollment

bp = Blueprint('enrollment', __name__)

# --- FLASK ROUTES ---

@bp.route('/')
def home_page():
    """Serves the static landing page with the enrollment form."""
    return current_app.send_static_file('index.html')

@bp.route('/enroll', methods=['POST'])
def enroll():
    store = get_store()
    # Raises InvalidInput / CourseNotFound, rendered as a 400 page by errors.py
    cleaned = validate_enrollment(request.form, store)

    enrollment = store.add_enrollment(
        cleaned.student_name,
        cleaned.student_id,
        cleaned.course,
        cleaned.semester,
        cleaned.reason,
    )
    print(f"--- Enrollment #{enrollment.id}: {cleaned.student_id} in {cleaned.course.code} ---")
    return redirect(url_for('enrollment.enrollments_list'))

@bp.route('/enrollments')
def enrollments_list():
    """Displays all current enrollments in creation order."""
    enrollments = get_store().list_enrollments()
    return render_template('enrollments.html', enrollments=enrollments)

@bp.route('/unenroll/<enrollment_id>', methods=['POST'])
def unenroll(enrollment_id):
    """Removes an enrollment. Unknown or malformed ids are silently ignored."""
    try:
        enrollment_id = int(enrollment_id)
    except ValueError:
        return redirect(url_for('enrollment.enrollments_list'))

    if get_store().remove_enrollment(enrollment_id):
        print(f"--- Removed enrollment #{enrollment_id} ---")

    return redirect(url_for('enrollment.enrollments_list'))

@bp.route('/courses')
def courses_list():
    """Displays the course catalog as cards."""
    courses = get_store().list_courses()
    return render_template('courses_list.html', courses=courses)

import pytest

from enrollment_app.errors import CourseNotFound, InvalidInput
from enrollment_app.validation import validate_enrollment


def test_valid_form(store, valid_form):
    cleaned = validate_enrollment(valid_form, store)
    assert cleaned.student_name == 'Ann Lee'
    assert cleaned.student_id == '1234-5678'
    assert cleaned.course.code == 'CS401'
    assert cleaned.semester == 'Fall 2024'
    assert cleaned.reason == ''


def test_whitespace_is_stripped(store, valid_form):
    valid_form['studentName'] = '  Ann Lee '
    valid_form['reason'] = ' because '
    cleaned = validate_enrollment(valid_form, store)
    assert cleaned.student_name == 'Ann Lee'
    assert cleaned.reason == 'because'


def test_reason_is_optional(store, valid_form):
    del valid_form['reason']
    assert validate_enrollment(valid_form, store).reason == ''


@pytest.mark.parametrize('field', ['studentName', 'studentId', 'courseCode', 'semester'])
def test_required_fields(store, valid_form, field):
    valid_form[field] = '   '
    with pytest.raises(InvalidInput):
        validate_enrollment(valid_form, store)


@pytest.mark.parametrize('student_id', ['12345', '1234-567', '12345-5678', 'abcd-efgh', '1234_5678', '１２３４-５６７８'])
def test_malformed_student_id(store, valid_form, student_id):
    valid_form['studentId'] = student_id
    with pytest.raises(InvalidInput):
        validate_enrollment(valid_form, store)


def test_unknown_course(store, valid_form):
    valid_form['courseCode'] = 'CS999'
    with pytest.raises(CourseNotFound):
        validate_enrollment(valid_form, store)


def test_errors_are_bad_requests():
    assert InvalidInput.code == 400
    assert CourseNotFound.code == 400

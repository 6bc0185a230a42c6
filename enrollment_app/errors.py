from flask import render_template
from werkzeug.exceptions import BadRequest, MethodNotAllowed, NotFound


class InvalidInput(BadRequest):
    """A required field is missing or malformed."""

    heading = "Invalid input"


class CourseNotFound(BadRequest):
    """The submitted course code is not in the catalog."""

    heading = "Course not found"


def register_error_handlers(app):
    @app.errorhandler(InvalidInput)
    @app.errorhandler(CourseNotFound)
    def bad_enrollment(error):
        return render_template('error.html', heading=error.heading, detail=error.description), 400

    # A known path with the wrong method is reported as a missing page too
    @app.errorhandler(NotFound)
    @app.errorhandler(MethodNotAllowed)
    def page_not_found(error):
        return render_template('not_found.html'), 404

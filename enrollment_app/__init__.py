from flask import Flask
from flask_sqlalchemy import SQLAlchemy
from dotenv import load_dotenv
import os

# --- Load Environment Variables FIRST ---
load_dotenv()

# --- Initialize Database Object ---
db = SQLAlchemy()

def create_app(test_config=None):
    """Create and configure an instance of the Flask application."""
    app = Flask(__name__)

    # --- CONFIGURATION ---
    # The default URI is an in-memory SQLite database; state is gone on restart.
    app.config['SQLALCHEMY_DATABASE_URI'] = os.getenv("ENROLLMENT_DATABASE_URI", 'sqlite://')
    app.config['SQLALCHEMY_TRACK_MODIFICATIONS'] = False
    app.config['PORT'] = int(os.getenv("PORT", 3000))

    if test_config is not None:
        app.config.update(test_config)

    # --- Associate Database with the App ---
    db.init_app(app)

    # --- Import and Register Routes, Models and the Store ---
    with app.app_context():
        # Import here to avoid circular imports
        from . import models
        from .store import EnrollmentStore
        from .routes import bp
        from .errors import register_error_handlers

        db.create_all()
        app.extensions['enrollment_store'] = EnrollmentStore(db, models.COURSE_CATALOG)

        app.register_blueprint(bp)
        register_error_handlers(app)

        return app

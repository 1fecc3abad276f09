# crud_demo/__init__.py
from flask import Flask
from dotenv import load_dotenv
from .extensions import db
from .errors import register_error_handlers
from .log_config import configure_logging
from .repositories import build_repositories
from .routes import auth, courses, orders, products, students

def create_app(test_config=None):
    load_dotenv()
    app = Flask(__name__)
    app.config.from_object("crud_demo.config.Config")
    if test_config:
        app.config.update(test_config)

    configure_logging(app.config["LOG_LEVEL"])

    # Keep fields in declaration order in JSON bodies
    app.json.sort_keys = False

    db.init_app(app)
    with app.app_context():
        db.create_all()

    # Repositories are built once here and handed to each blueprint
    repos = build_repositories(db.session)
    app.register_blueprint(auth.create_blueprint(repos["auth"]), url_prefix="/auth")
    app.register_blueprint(courses.create_blueprint(repos["courses"]), url_prefix="/courses")
    app.register_blueprint(orders.create_blueprint(repos["orders"]), url_prefix="/orders")
    app.register_blueprint(products.create_blueprint(repos["products"]), url_prefix="/products")
    app.register_blueprint(students.create_blueprint(repos["students"]), url_prefix="/students")

    register_error_handlers(app)
    return app

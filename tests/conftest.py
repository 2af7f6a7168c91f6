import os
import sys
import pytest

sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))
from models import db

@pytest.fixture(scope='session')
def app_instance():
    os.environ.setdefault('APP_ENV', 'testing')
    os.environ.setdefault('DATABASE_URL', 'sqlite:///:memory:')
    from app import create_app
    from app.config import TestingConfig
    app = create_app(TestingConfig)
    app.config.update(
        TESTING=True,
        SQLALCHEMY_DATABASE_URI='sqlite:///:memory:',
        SQLALCHEMY_TRACK_MODIFICATIONS=False
    )
    return app

@pytest.fixture(scope='function')
def app(app_instance):
    with app_instance.app_context():
        db.drop_all()
        db.create_all()
        yield app_instance
        db.session.remove()
        db.drop_all()

@pytest.fixture(scope='function')
def client(app):
    return app.test_client()


@pytest.fixture
def make_user(app):
    """Create and commit a user; vendors get their empty profile."""
    from app.services.accounts import register_user, upsert_admin

    def _make(email, role="vendor"):
        if role == "admin":
            user, _ = upsert_admin(email)
        else:
            user = register_user(email, first_name="Test", last_name="User", role=role)
        db.session.commit()
        return user

    return _make


@pytest.fixture
def vendor(make_user):
    return make_user("vendor@example.com", role="vendor")


@pytest.fixture
def auth_header(app):
    from app.utils import create_access_token

    def _header(user):
        return {"Authorization": f"Bearer {create_access_token(user.id, user.role or '')}"}

    return _header

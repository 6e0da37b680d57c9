import os

os.environ.setdefault("LOG_TO_FILE", "false")
os.environ.setdefault("JWT_SECRET_KEY", "test-secret-key-for-progress-point-tests")

import pytest
from unittest.mock import MagicMock, patch
from flask_jwt_extended import create_access_token

from progress_point.app import create_app
from progress_point.repositories.core.repository_factory import RepositoryFactory
from progress_point.utils.cache.cache_utils import leaderboard_cache


@pytest.fixture(autouse=True)
def clear_leaderboard_cache():
    leaderboard_cache.clear()
    yield
    leaderboard_cache.clear()


@pytest.fixture
def batch_repo():
    repo = MagicMock()
    with patch.object(RepositoryFactory, "get_batch_repo", return_value=repo):
        yield repo


@pytest.fixture
def restriction_repo():
    repo = MagicMock()
    repo.find_by_type.return_value = None
    with patch.object(RepositoryFactory, "get_time_restriction_repo", return_value=repo):
        yield repo


@pytest.fixture
def app():
    app = create_app(TESTING=True)
    yield app


@pytest.fixture
def client(app):
    return app.test_client()


def _auth_header(app, user_type, **claims):
    with app.app_context():
        token = create_access_token(identity=f"{user_type}-user", additional_claims={"userType": user_type, **claims})
    return {"Authorization": f"Bearer {token}"}


@pytest.fixture
def admin_headers(app):
    return _auth_header(app, "admin", adminName="Asha")


@pytest.fixture
def student_headers(app):
    return _auth_header(app, "student")

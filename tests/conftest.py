"""
Pytest Configuration and Fixtures
Shared fixtures and configuration for all tests
"""

import pytest
from datetime import datetime, timedelta, timezone

from post_service.config.settings import TestingConfig
from post_service.main import create_app
from post_service.repositories import PostRepository
from post_service.graphql_api import ResolversContext


class FakeClock:
    """Deterministic clock advancing a fixed step on every call"""

    def __init__(self, start=None, step=timedelta(seconds=1)):
        self.current = start or datetime(2024, 1, 1, 12, 0, 0, tzinfo=timezone.utc)
        self.step = step

    def __call__(self):
        now = self.current
        self.current += self.step
        return now


# ============================================
# REPOSITORY FIXTURES
# ============================================

@pytest.fixture
def clock():
    """Fake clock"""
    return FakeClock()


@pytest.fixture
def empty_repo(clock):
    """PostRepository with no posts"""
    return PostRepository(clock=clock)


@pytest.fixture
def post_repo(clock):
    """PostRepository seeded with the three fixture posts"""
    repo = PostRepository(clock=clock)
    repo.load_fixtures()
    return repo


@pytest.fixture
def resolvers_ctx(post_repo):
    """Resolver context over the seeded repository"""
    return ResolversContext(post_repo)


# ============================================
# APP FIXTURES
# ============================================

@pytest.fixture
def app(post_repo):
    """Create Flask app for testing"""
    return create_app(TestingConfig, post_repo=post_repo)


@pytest.fixture
def client(app):
    """Get Flask test client"""
    return app.test_client()


@pytest.fixture
def graphql(client):
    """POST a GraphQL document and return the decoded JSON response"""

    def execute(query, variables=None):
        payload = {'query': query}
        if variables is not None:
            payload['variables'] = variables
        response = client.post('/graphql', json=payload)
        assert response.status_code == 200
        return response.get_json()

    return execute


# ============================================
# MARKERS
# ============================================

def pytest_configure(config):
    """Configure pytest markers"""
    config.addinivalue_line("markers", "unit: mark test as unit test")
    config.addinivalue_line("markers", "integration: mark test as integration test")
    config.addinivalue_line("markers", "repo: mark test as repository test")
    config.addinivalue_line("markers", "graphql: mark test as GraphQL schema/resolver test")
    config.addinivalue_line("markers", "api: mark test as API test")

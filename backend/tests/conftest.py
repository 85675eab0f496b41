"""Root conftest: shared test configuration."""

import os

# Tests never talk to a real database or share the production secret
os.environ.setdefault("DATABASE_URL", "sqlite+aiosqlite:///test.db")
os.environ.setdefault("JWT_SECRET", "test-secret-for-pressroom-tests")

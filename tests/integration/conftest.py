"""Integration test configuration and fixtures.

Makes the Testcontainers PostgreSQL fixtures available to every test under
``tests/integration``. Only tests marked ``@pytest.mark.integration`` use
them, so the container is never started in a default run.
"""

from tests.shared.fixtures.database import (  # noqa: F401
    pg_session,
    pg_url,
    postgres_container,
)

from userhub.infrastructure.persistence.sqlalchemy.database import (
    create_engine,
    create_session_maker,
    create_tables,
    drop_tables,
    ping,
)

__all__ = [
    "create_engine",
    "create_session_maker",
    "create_tables",
    "drop_tables",
    "ping",
]

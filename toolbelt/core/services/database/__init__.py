from toolbelt.core.services.database.service import (
    DocumentCache,
    close_database,
    connect_with_retry,
    get_collection,
    get_database,
)

__all__ = [
    'DocumentCache',
    'close_database',
    'connect_with_retry',
    'get_collection',
    'get_database',
]

"""
LAWGAN Core
===========

Shared configuration, persistence, logging and codecs for the LAWGAN modules.
"""

from .config import Config
from .database import Database, SQLAlchemyDatabase, create_database, get_database
from .logging_service import LoggingService, logger, db_log

__all__ = [
    'Config', 'Database', 'SQLAlchemyDatabase', 'create_database', 'get_database',
    'LoggingService', 'logger', 'db_log',
]

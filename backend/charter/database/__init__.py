"""
Database package for the charter backend.

This package provides SQLAlchemy models and database configuration
for accounts, planes, pilots and trips.
"""

from .models import (
    Base,
    Account,
    Plane,
    Pilot,
    Trip,
    create_all_tables,
    drop_all_tables
)

from .config import (
    DatabaseConfig,
    initialize_database,
)

__all__ = [
    # Models
    'Base',
    'Account',
    'Plane',
    'Pilot',
    'Trip',
    'create_all_tables',
    'drop_all_tables',

    # Configuration
    'DatabaseConfig',
    'initialize_database',
]

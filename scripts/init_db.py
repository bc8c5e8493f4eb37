"""
Database initialization script.

Creates every table of the driving school schema on the configured
database (``DATABASE_URI`` or the ``DATABASE_*`` settings).

Usage:
    python scripts/init_db.py
"""

import sys
from pathlib import Path

# Add project root to path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from dotenv import load_dotenv

load_dotenv()

from drivingschool.core.config import settings
from drivingschool.core.logger import configure_logging
from drivingschool.db.init_db import init_db

if __name__ == "__main__":
    configure_logging(settings.LOG_LEVEL)
    print("=" * 50)
    print("Driving School Database Initialization")
    print("=" * 50)
    print()

    try:
        init_db()
        print()
        print("=" * 50)
        print("SUCCESS: Database initialized!")
        print("=" * 50)
        sys.exit(0)

    except Exception as e:
        print()
        print("=" * 50)
        print("ERROR: Database initialization failed!")
        print(f"Details: {e}")
        print("=" * 50)
        sys.exit(1)

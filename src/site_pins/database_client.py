import logging
import os
import sqlite3
try:
    from . import config as config
    from .models import NewMarker, row_to_marker
except ImportError:
    import config as config
    from models import NewMarker, row_to_marker

logger = logging.getLogger(__name__)


def get_db_connection(db_path=None):
    """Establishes a connection to the SQLite database."""
    db_path = db_path or config.DB_PATH
    parent = os.path.dirname(os.path.abspath(db_path))
    os.makedirs(parent, exist_ok=True)
    # One connection is shared by the request threads of the server.
    # Autocommit: every statement is its own transaction.
    conn = sqlite3.connect(db_path, check_same_thread=False, isolation_level=None)
    conn.row_factory = sqlite3.Row
    return conn


class MarkerStore:
    """Durable storage for map markers in a single SQLite table.

    The connection is opened once and reused for every operation. Call
    `initialize()` once before serving; it is safe to call again.
    """

    def __init__(self, db_path=None):
        self.db_path = db_path or config.DB_PATH
        self._conn = get_db_connection(self.db_path)

    def initialize(self):
        """Creates the markers table if it doesn't exist."""
        self._conn.execute("""
            CREATE TABLE IF NOT EXISTS markers (
                id INTEGER PRIMARY KEY AUTOINCREMENT,
                latitude REAL NOT NULL,
                longitude REAL NOT NULL,
                website TEXT NOT NULL,
                siteName TEXT NOT NULL,
                siteDescription TEXT,
                ownerName TEXT,
                ownerDescription TEXT,
                ownerWebsite TEXT,
                isAnonymous INTEGER NOT NULL DEFAULT 0,
                created_at TIMESTAMP DEFAULT CURRENT_TIMESTAMP
            );
        """)
        logger.info("Marker store ready at %s", self.db_path)

    def insert(self, marker: NewMarker) -> dict:
        """Insert one marker. Returns the number of rows written and the new id.

        sqlite3 errors are not caught here; the caller decides how to report them.
        """
        cursor = self._conn.cursor()
        try:
            cursor.execute("""
                INSERT INTO markers (
                    latitude, longitude, website, siteName, siteDescription,
                    ownerName, ownerDescription, ownerWebsite, isAnonymous
                ) VALUES (
                    :latitude, :longitude, :website, :siteName, :siteDescription,
                    :ownerName, :ownerDescription, :ownerWebsite, :isAnonymous
                )
                RETURNING id
            """, marker.to_params())
            # the id comes from this statement, not from the shared connection
            new_id = cursor.fetchall()[0]["id"]
            outcome = {"changes": 1, "lastInsertRowid": new_id}
        finally:
            cursor.close()
        return outcome

    def list_all(self) -> list:
        """Return every stored marker as a list of dicts."""
        cursor = self._conn.cursor()
        try:
            cursor.execute("SELECT * FROM markers")
            rows = cursor.fetchall()
        finally:
            cursor.close()
        return [row_to_marker(r) for r in rows]

    def close(self):
        self._conn.close()

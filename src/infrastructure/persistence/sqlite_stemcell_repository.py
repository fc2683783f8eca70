# src/infrastructure/persistence/sqlite_stemcell_repository.py
import os
import sqlite3
import threading
from contextlib import contextmanager
from datetime import datetime, timezone
from typing import Any, Iterator, List, Optional, Tuple

from src.domain.deployment.aggregate import Deployment
from src.domain.stemcell.exceptions import StemcellAlreadyExistsError
from src.domain.stemcell.repository import StemcellRepository
from src.domain.stemcell.value_objects import StemcellRecord
from src.infrastructure.exceptions import StorageError
from src.infrastructure.logging.logger import get_logger

MEMORY_DB = ":memory:"

_COLUMNS = "id, name, operating_system, version, cpi, cid, created_at"


class SQLiteStemcellRepository(StemcellRepository):
    """
    SQLite implementation of the stemcell repository.

    Handles:
    - Stemcell records, unique per (name, version, cpi)
    - Deployment to stemcell associations, unique per pair
    - Deterministic ordering by ascending record id
    """

    def __init__(self, db_path: str = MEMORY_DB, enable_wal: bool = True):
        """
        Initialize SQLite repository.

        Args:
            db_path: Path to SQLite database file, or ":memory:"
            enable_wal: Whether to enable Write-Ahead Logging for file databases
        """
        self._db_path = db_path if db_path == MEMORY_DB else os.path.expandvars(db_path)
        self._logger = get_logger(__name__)

        # Thread-local storage for connections to file databases
        self._local = threading.local()
        # An in-memory database exists only inside its connection, so all threads share one
        self._shared_connection: Optional[sqlite3.Connection] = None
        self._shared_lock = threading.RLock()

        if self._db_path != MEMORY_DB:
            db_dir = os.path.dirname(self._db_path)
            if db_dir:
                os.makedirs(db_dir, exist_ok=True)

        self._init_database(enable_wal and self._db_path != MEMORY_DB)

    def _connect(self, check_same_thread: bool = True) -> sqlite3.Connection:
        conn = sqlite3.connect(self._db_path, check_same_thread=check_same_thread)
        conn.row_factory = sqlite3.Row
        conn.execute("PRAGMA foreign_keys = ON")
        return conn

    @contextmanager
    def _get_connection(self) -> Iterator[sqlite3.Connection]:
        """Get a connection for the calling thread, translating driver errors."""
        if self._db_path == MEMORY_DB:
            with self._shared_lock:
                if self._shared_connection is None:
                    self._shared_connection = self._connect(check_same_thread=False)
                yield from self._transaction(self._shared_connection)
            return

        if not hasattr(self._local, "connection"):
            self._local.connection = self._connect()
        yield from self._transaction(self._local.connection)

    @staticmethod
    def _transaction(conn: sqlite3.Connection) -> Iterator[sqlite3.Connection]:
        try:
            yield conn
            conn.commit()
        except sqlite3.IntegrityError:
            conn.rollback()
            raise
        except sqlite3.Error as e:
            conn.rollback()
            raise StorageError(f"Database error: {str(e)}")

    def _init_database(self, enable_wal: bool) -> None:
        """Initialize database schema and configuration."""
        with self._get_connection() as conn:
            if enable_wal:
                conn.execute("PRAGMA journal_mode=WAL")

            conn.execute("""
                CREATE TABLE IF NOT EXISTS stemcells (
                    id INTEGER PRIMARY KEY AUTOINCREMENT,
                    name TEXT NOT NULL,
                    operating_system TEXT NOT NULL DEFAULT '',
                    version TEXT NOT NULL,
                    cpi TEXT NOT NULL DEFAULT '',
                    cid TEXT NOT NULL,
                    created_at TIMESTAMP NOT NULL DEFAULT CURRENT_TIMESTAMP,
                    UNIQUE (name, version, cpi)
                )
            """)

            conn.execute("""
                CREATE INDEX IF NOT EXISTS idx_stemcells_os_version
                ON stemcells(operating_system, version)
            """)

            conn.execute("""
                CREATE TABLE IF NOT EXISTS deployments_stemcells (
                    deployment_name TEXT NOT NULL,
                    stemcell_id INTEGER NOT NULL,
                    PRIMARY KEY (deployment_name, stemcell_id),
                    FOREIGN KEY (stemcell_id) REFERENCES stemcells(id)
                )
            """)

    def add(self, record: StemcellRecord) -> StemcellRecord:
        """Store a new stemcell record and return it with its id set."""
        created_at = record.created_at or datetime.now(timezone.utc)
        try:
            with self._get_connection() as conn:
                cursor = conn.execute(
                    """
                    INSERT INTO stemcells (name, operating_system, version, cpi, cid, created_at)
                    VALUES (?, ?, ?, ?, ?, ?)
                    """,
                    (
                        record.name,
                        record.operating_system,
                        record.version,
                        record.cpi,
                        record.cid,
                        created_at.isoformat(),
                    ),
                )
                record_id = cursor.lastrowid
        except sqlite3.IntegrityError:
            raise StemcellAlreadyExistsError(record.name, record.version, record.cpi)

        self._logger.debug(
            "Stored stemcell",
            stemcell=record.describe(),
            cpi=record.cpi,
            cid=record.cid,
        )
        return record.model_copy(update={"id": record_id, "created_at": created_at})

    def find_by_id(self, record_id: int) -> Optional[StemcellRecord]:
        """Find a stemcell record by id."""
        rows = self._query(f"SELECT {_COLUMNS} FROM stemcells WHERE id = ?", (record_id,))
        return rows[0] if rows else None

    def find_by_name_and_version(self, name: str, version: str) -> List[StemcellRecord]:
        """Find records with the given name and version on any CPI."""
        return self._query(
            f"SELECT {_COLUMNS} FROM stemcells WHERE name = ? AND version = ? ORDER BY id",
            (name, version),
        )

    def find_by_os_and_version(self, operating_system: str, version: str) -> List[StemcellRecord]:
        """Find records with the given operating system and version on any CPI."""
        return self._query(
            f"SELECT {_COLUMNS} FROM stemcells "
            "WHERE operating_system = ? AND version = ? ORDER BY id",
            (operating_system, version),
        )

    def find_all(self) -> List[StemcellRecord]:
        """Find all stemcell records."""
        return self._query(f"SELECT {_COLUMNS} FROM stemcells ORDER BY id")

    def add_deployment(self, record: StemcellRecord, deployment: Deployment) -> None:
        """Associate a record with a deployment; associating twice is a no-op."""
        if record.id is None:
            raise StorageError(f"Stemcell {record.describe()} has not been stored")
        try:
            with self._get_connection() as conn:
                conn.execute(
                    """
                    INSERT OR IGNORE INTO deployments_stemcells (deployment_name, stemcell_id)
                    VALUES (?, ?)
                    """,
                    (deployment.name, record.id),
                )
        except sqlite3.IntegrityError as e:
            raise StorageError(f"Cannot associate stemcell {record.describe()}: {str(e)}")

    def find_by_deployment(self, deployment_name: str) -> List[StemcellRecord]:
        """Find the records associated with a deployment."""
        return self._query(
            f"""
            SELECT {', '.join('s.' + c.strip() for c in _COLUMNS.split(','))}
            FROM stemcells s
            JOIN deployments_stemcells ds ON ds.stemcell_id = s.id
            WHERE ds.deployment_name = ?
            ORDER BY s.id
            """,
            (deployment_name,),
        )

    def _query(self, sql: str, params: Tuple[Any, ...] = ()) -> List[StemcellRecord]:
        with self._get_connection() as conn:
            rows = conn.execute(sql, params).fetchall()
        return [self._to_record(row) for row in rows]

    @staticmethod
    def _to_record(row: sqlite3.Row) -> StemcellRecord:
        return StemcellRecord(
            id=row["id"],
            name=row["name"],
            operating_system=row["operating_system"],
            version=row["version"],
            cpi=row["cpi"],
            cid=row["cid"],
            created_at=datetime.fromisoformat(row["created_at"]) if row["created_at"] else None,
        )

    def close(self) -> None:
        """Close this thread's connection, or the shared in-memory one."""
        with self._shared_lock:
            if self._shared_connection is not None:
                self._shared_connection.close()
                self._shared_connection = None
        if hasattr(self._local, "connection"):
            self._local.connection.close()
            del self._local.connection

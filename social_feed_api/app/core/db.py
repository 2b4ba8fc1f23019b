"""
SQLite database integration.

``Database`` is the store handle: the application builds one at start
up and hands it to every service, so tests can point each service at
their own throwaway file.  Every operation opens its own connection
through ``Database.cursor`` and closes it on exit; nothing else is
shared between requests.

Table and column names (``miembros``, ``publicaciones``,
``comentarios`` and ``comentarios_sobre_mi``) are the ones already
present in deployed ``database.sqlite`` files, so those files keep
working as is.
"""

import logging
import os
import sqlite3
from contextlib import contextmanager
from pathlib import Path
from typing import Iterator, Optional

from .config import Settings, settings as default_settings
from .errors import StoreError


logger = logging.getLogger(__name__)


SCHEMA = """
CREATE TABLE IF NOT EXISTS miembros (
    id INTEGER PRIMARY KEY AUTOINCREMENT,
    nombre TEXT,
    email TEXT UNIQUE,
    password TEXT
);

CREATE TABLE IF NOT EXISTS publicaciones (
    id INTEGER PRIMARY KEY AUTOINCREMENT,
    usuario_id INTEGER,
    contenido TEXT,
    fecha TEXT,
    FOREIGN KEY(usuario_id) REFERENCES miembros(id)
);

CREATE TABLE IF NOT EXISTS comentarios (
    id INTEGER PRIMARY KEY AUTOINCREMENT,
    usuario_id INTEGER,
    publicacion_id INTEGER,
    comentario TEXT,
    fecha TEXT,
    FOREIGN KEY(usuario_id) REFERENCES miembros(id),
    FOREIGN KEY(publicacion_id) REFERENCES publicaciones(id)
);

CREATE TABLE IF NOT EXISTS comentarios_sobre_mi (
    id INTEGER PRIMARY KEY AUTOINCREMENT,
    usuario_id INTEGER,
    comentario TEXT,
    fecha TEXT,
    FOREIGN KEY(usuario_id) REFERENCES miembros(id)
);
"""


def get_database_path(config: Optional[Settings] = None) -> str:
    """Compute the path to the SQLite database file.

    If ``database_url`` is an absolute path, use it directly.
    Otherwise resolve it relative to the project root.
    """
    db_url = (config or default_settings).database_url
    if os.path.isabs(db_url):
        return db_url
    base_dir = Path(__file__).resolve().parent.parent.parent.parent  # project root
    return str((base_dir / db_url).resolve())


class Database:
    """Handle on a single SQLite database file."""

    def __init__(self, path: str) -> None:
        self.path = path

    def connect(self) -> sqlite3.Connection:
        """Open a new connection with rows addressable by column name.

        Foreign key enforcement is off by default in SQLite and has to
        be switched on for every connection.
        """
        conn = sqlite3.connect(self.path)
        conn.row_factory = sqlite3.Row
        conn.execute("PRAGMA foreign_keys = ON")
        return conn

    @contextmanager
    def cursor(self) -> Iterator[sqlite3.Cursor]:
        """Yield a cursor; commit on success, roll back on error.

        Any ``sqlite3.Error`` raised while opening the connection or
        inside the block is re‑raised as ``StoreError``, as is the
        ``OverflowError`` sqlite3 raises for integers beyond 64 bits.
        """
        try:
            conn = self.connect()
        except sqlite3.Error as e:
            raise StoreError(str(e)) from e
        try:
            yield conn.cursor()
            conn.commit()
        except (sqlite3.Error, OverflowError) as e:
            conn.rollback()
            raise StoreError(str(e)) from e
        except Exception:
            conn.rollback()
            raise
        finally:
            conn.close()

    def init_schema(self) -> None:
        """Create the four tables if they do not exist yet.

        Safe to call on every start.  The parent directory of the
        database file is created when missing.
        """
        parent = Path(self.path).parent
        parent.mkdir(parents=True, exist_ok=True)
        with self.cursor() as cursor:
            cursor.executescript(SCHEMA)
        logger.info("Database schema ready at %s", self.path)

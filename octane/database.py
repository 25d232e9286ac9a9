"""SQLite storage for test results, system details and upload records."""

import dataclasses
import sqlite3
from dataclasses import dataclass
from os import PathLike
from typing import Any, ClassVar, Optional, Union

_SQL_TYPES = {int: ("INTEGER", "0"), float: ("REAL", "0"), str: ("TEXT", "''")}


@dataclass
class TestResult:
    """Score of one test of a component such as the CPU, memory or storage."""

    __test__ = False
    __tablename__: ClassVar[str] = "test_results"

    id: Optional[int] = None
    test_type: str = ""
    score: float = 0.0
    timestamp: str = ""


@dataclass
class SystemInfoRecord:
    """Hardware and operating system of a tested machine."""

    __tablename__: ClassVar[str] = "system_infos"

    id: Optional[int] = None
    hostname: str = ""
    os: str = ""
    cpu: str = ""
    memory: str = ""
    storage: str = ""
    gpu: str = ""


@dataclass
class UploadRecord:
    """Outcome of uploading one report."""

    __tablename__: ClassVar[str] = "upload_records"

    id: Optional[int] = None
    report_id: str = ""
    status: str = ""
    timestamp: str = ""


def _model_class(model: Any) -> type:
    cls = model if isinstance(model, type) else type(model)
    if not dataclasses.is_dataclass(cls) or not isinstance(getattr(cls, "__tablename__", None), str):
        raise TypeError(f"{cls.__name__} is not a database model")
    return cls


def _column_definitions(cls: type) -> list[tuple[str, str]]:
    columns = []
    for f in dataclasses.fields(cls):
        if f.name == "id":
            columns.append(("id", "INTEGER PRIMARY KEY AUTOINCREMENT"))
            continue
        try:
            sql_type, default = _SQL_TYPES[f.type]
        except (KeyError, TypeError):
            raise TypeError(f"{cls.__name__}.{f.name}: unsupported column type") from None
        columns.append((f.name, f"{sql_type} NOT NULL DEFAULT {default}"))
    return columns


class Database:
    """A connection to an SQLite database file (``:memory:`` for a private one)."""

    def __init__(self, data_source_name: Union[str, PathLike]) -> None:
        self.connection = sqlite3.connect(data_source_name)

    def __enter__(self) -> "Database":
        return self

    def __exit__(self, *exc_info: Any) -> None:
        self.close()

    def _columns(self, table: str) -> list[str]:
        return [row[1] for row in self.connection.execute(f'PRAGMA table_info("{table}")')]

    def migrate(self, *args: Any) -> None:
        """Create the tables of the given models and add any columns they lack.

        Raises TypeError when an argument is not a model.
        """
        models = [_model_class(model) for model in args]
        with self.connection:
            for cls in models:
                table = cls.__tablename__
                columns = _column_definitions(cls)
                existing = self._columns(table)
                if not existing:
                    body = ", ".join(f'"{name}" {definition}' for name, definition in columns)
                    self.connection.execute(f'CREATE TABLE "{table}" ({body})')
                    continue
                for name, definition in columns:
                    if name not in existing and name != "id":
                        self.connection.execute(f'ALTER TABLE "{table}" ADD COLUMN "{name}" {definition}')

    def table_names(self) -> list[str]:
        """Names of the user tables, in alphabetical order."""
        rows = self.connection.execute(
            "SELECT name FROM sqlite_master WHERE type = 'table' AND name NOT LIKE 'sqlite_%' ORDER BY name"
        )
        return [row[0] for row in rows]

    def close(self) -> None:
        """Close the connection."""
        self.connection.close()


def initialize_database(db: Database) -> None:
    """Create the tables for every model the application stores."""
    db.migrate(TestResult, SystemInfoRecord, UploadRecord)
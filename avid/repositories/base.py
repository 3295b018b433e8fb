"""
Generic SQL repository.

Wraps an injected SQLAlchemy Connection and provides the query
building blocks shared by table-backed repositories:
- base SELECT over an aliased table with offset/limit
- COUNT(*) query over the same alias
- statement execution with bound parameters
- hydration of result rows into domain objects

Repositories never commit. The caller owns the transaction
(see avid.database.get_db_context).
"""

import logging
from abc import ABC, abstractmethod
from typing import Any, Dict, List, Mapping, Optional, Sequence

from sqlalchemy import Select, Table, func, select
from sqlalchemy.engine import Connection, CursorResult
from sqlalchemy.sql import Executable
from sqlalchemy.sql.selectable import Alias

logger = logging.getLogger(__name__)


class SqlRepository(ABC):
    """
    Base class for repositories backed by a single table.

    Subclasses provide the table, the alias used in SELECT
    statements, and the row → domain object mapping.
    """

    def __init__(self, connection: Connection):
        """
        Args:
            connection: Open SQLAlchemy connection used for every statement
        """
        self._connection = connection
        self._alias = self.get_table().alias(self.get_alias())

    # ========================================
    # Table Description
    # ========================================

    @abstractmethod
    def get_table(self) -> Table:
        """Table written by INSERT/UPDATE/DELETE statements."""

    @abstractmethod
    def get_alias(self) -> str:
        """Alias of the table in SELECT statements."""

    @property
    def alias(self) -> Alias:
        return self._alias

    # ========================================
    # Query Building
    # ========================================

    def get_connection(self) -> Connection:
        return self._connection

    def create_query_builder(self) -> Select:
        """Empty SELECT; callers add columns and the FROM clause."""
        return select()

    def get_base_query(self, first: int = 0, max_results: Optional[int] = None) -> Select:
        """
        Select every column of the aliased table.

        Args:
            first: Number of rows to skip
            max_results: Maximum number of rows, None for no limit

        Raises:
            ValueError: If first or max_results is negative
        """
        if first < 0:
            raise ValueError(f"first must be >= 0, got {first}")
        if max_results is not None and max_results < 0:
            raise ValueError(f"max_results must be >= 0, got {max_results}")

        query = select(self.alias)
        if first:
            query = query.offset(first)
        if max_results is not None:
            query = query.limit(max_results)
        return query

    def get_count_query(self) -> Select:
        """SELECT count(*) AS count over the aliased table."""
        return (
            self.create_query_builder()
            .add_columns(func.count().label("count"))
            .select_from(self.alias)
        )

    # ========================================
    # Execution
    # ========================================

    def execute(self, statement: Executable, parameters: Optional[Dict[str, Any]] = None) -> CursorResult:
        """Execute a statement on the repository connection."""
        # Parameter values are not logged; they may contain password hashes
        logger.debug("Executing: %s", statement)
        if parameters:
            return self._connection.execute(statement, parameters)
        return self._connection.execute(statement)

    def fetch_scalar_count(self, query: Select, parameters: Optional[Dict[str, Any]] = None) -> int:
        """Run a count query and return the "count" column as int."""
        row = self.execute(query, parameters).mappings().first()
        return int(row["count"])

    # ========================================
    # Hydration
    # ========================================

    @abstractmethod
    def hydrate(self, row: Mapping[str, Any]) -> Any:
        """Build a domain object from a result row."""

    def hydrate_all(self, rows: Sequence[Mapping[str, Any]]) -> List[Any]:
        return [self.hydrate(row) for row in rows]

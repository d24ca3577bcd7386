from contextlib import contextmanager

import sqlalchemy as sa
from sqlalchemy.engine import URL
from sqlalchemy.exc import DBAPIError, ResourceClosedError
from sqlalchemy.schema import CreateTable, DropTable

from ..config import get_settings
from ..logger import logger
from ..helpers.utils import statement_kind, iter_statements
from .commit import CommitMode
from .filters import get_table, build_criteria, build_values, build_order_by
from .pending_changes import PendingChanges
from .schema import define_tables, EMPLOYEES, DEPARTMENTS


def create_sqlite_engine(path, echo=False):
    """
    Engine for a SQLite database file, created on first connect.
    ``":memory:"`` gives a private in-memory database.
    """
    url = URL.create("sqlite", database=str(path))
    return sa.create_engine(url, echo=echo)


class StatementRunner:
    """
    Executes statements in program order on a single connection.

    The connection is the handle passed in by the caller. Mutating statements
    are committed according to ``commit_mode``; read statements never commit.
    Once closed, every operation raises ``ResourceClosedError``.
    """
    def __init__(self, connection, commit_mode=CommitMode.AUTO):
        self.connection = connection
        self.commit_mode = CommitMode(commit_mode)
        self.metadata = define_tables()

        # Uncommitted mutating statements
        self.pending_changes = PendingChanges()

        # Only set when the runner created the engine itself, see open()
        self._engine = None
        self._batch_depth = 0
        self._closed = False

    @classmethod
    def open(cls, path=None, commit_mode=None, echo=None):
        settings = get_settings()
        if path is None:
            path = settings.database_path
        if commit_mode is None:
            commit_mode = settings.commit_mode
        if echo is None:
            echo = settings.echo

        logger.debug(f"Opening database '{path}' (commit_mode={CommitMode(commit_mode).value})")
        engine = create_sqlite_engine(path, echo=echo)
        try:
            connection = engine.connect()
        except Exception:
            engine.dispose()
            raise

        runner = cls(connection, commit_mode)
        runner._engine = engine
        return runner

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc_value, traceback):
        self.close()

    @property
    def closed(self):
        return self._closed or self.connection.closed

    @property
    def autocommit(self):
        return self.commit_mode is CommitMode.AUTO and not self._batch_depth

    def _check_open(self):
        if self.closed:
            raise ResourceClosedError("This Connection is closed")

    def _execute(self, statement, params):
        if isinstance(statement, str):
            if isinstance(params, dict):
                return self.connection.execute(sa.text(statement), params)

            # Sent as is; "?" placeholders are substituted by the driver
            return self.connection.exec_driver_sql(statement, tuple(params or ()))

        return self.connection.execute(statement, params)

    def execute(self, statement, params=None):
        """
        Run one statement and return its ``Result``.

        ``statement`` is either a SQL string or a SQLAlchemy executable. A SQL
        string goes to the driver unchanged with a tuple/list of values for
        its ``?`` placeholders; only a dict of params binds ``:name``
        placeholders.
        """
        self._check_open()

        kind = statement_kind(statement)
        logger.debug(f"Executing {kind} statement")

        try:
            result = self._execute(statement, params)
        except DBAPIError:
            if self.autocommit:
                self.rollback()
            raise

        if not result.returns_rows:
            self.pending_changes.record(kind, result.rowcount)
            if self.autocommit:
                self.commit()

        return result

    def run(self, statements):
        """
        Execute ``statements`` strictly in order.

        Each item is a statement or a ``(statement, params)`` pair. Rows of
        reading statements are fetched into lists, other statements report
        their row count. In manual mode the sequence is committed once at the
        end and rolled back as a whole if any statement fails.
        """
        if self.commit_mode is CommitMode.MANUAL:
            with self.batch():
                return self._run(statements)

        return self._run(statements)

    def _run(self, statements):
        outcomes = []
        for statement, params in iter_statements(statements):
            result = self.execute(statement, params)
            if result.returns_rows:
                outcomes.append(result.all())
            else:
                outcomes.append(result.rowcount)
        return outcomes

    @contextmanager
    def batch(self):
        """
        Group operations under a single commit, issued when the outermost
        block exits. An exception leaving the outermost block rolls back
        everything not yet committed; one leaving a nested block propagates
        untouched and the outermost block decides.
        """
        self._check_open()

        self._batch_depth += 1
        try:
            yield self
        except Exception:
            self._batch_depth -= 1
            if not self._batch_depth and not self.closed:
                self.rollback()
            raise

        self._batch_depth -= 1
        if not self._batch_depth:
            self.commit()

    def commit(self):
        self._check_open()

        if self.pending_changes.dirty:
            logger.debug(f"Committing {self.pending_changes} ...")

        self.connection.commit()
        self.pending_changes.clear()

    def rollback(self):
        self._check_open()

        logger.debug(f"Rolling back {self.pending_changes} ...")
        self.connection.rollback()
        self.pending_changes.rollback()

    def close(self):
        if self._closed:
            return

        self._closed = True
        if self.pending_changes.dirty:
            logger.debug(f"Closing with uncommitted work: {self.pending_changes}")

        try:
            self.connection.close()
        finally:
            if self._engine is not None:
                self._engine.dispose()
                self._engine = None

    def table(self, name=EMPLOYEES):
        return get_table(self.metadata, name)

    def table_names(self):
        self._check_open()
        return sa.inspect(self.connection).get_table_names()

    def create_table(self, table=EMPLOYEES, if_not_exists=False):
        self._check_open()
        table = self.table(table)
        logger.debug(f"Creating table '{table.name}' (if_not_exists={if_not_exists})")

        self.execute(CreateTable(table, if_not_exists=if_not_exists))
        return table

    def drop_table(self, table=EMPLOYEES, if_exists=False):
        self._check_open()
        table = self.table(table)
        logger.debug(f"Dropping table '{table.name}' (if_exists={if_exists})")

        self.execute(DropTable(table, if_exists=if_exists))

    def add_column(self, name, type_, table=EMPLOYEES):
        """
        ``ALTER TABLE ... ADD COLUMN`` then refresh the table definition from
        the database so the new column can be filtered on and written to.
        """
        self._check_open()
        table = self.table(table)
        dialect = self.connection.dialect
        preparer = dialect.identifier_preparer

        if isinstance(type_, type):
            type_ = type_()

        ddl = (
            f"ALTER TABLE {preparer.format_table(table)} "
            f"ADD COLUMN {preparer.quote(name)} {type_.compile(dialect=dialect)}"
        )
        logger.debug(f"Adding column '{name}' to table '{table.name}'")

        self.execute(ddl, ())
        return self._reflect(table.name)

    def _reflect(self, tablename):
        return sa.Table(
            tablename,
            self.metadata,
            autoload_with=self.connection,
            extend_existing=True,
        )

    def insert_row(self, table, values):
        """
        Insert one row and return the primary key the engine assigned to it.
        """
        self._check_open()
        table = self.table(table)
        result = self.execute(sa.insert(table).values(build_values(table, values)))
        return result.inserted_primary_key[0]

    def insert(self, name, age=None, department=None, **extra):
        return self.insert_row(
            EMPLOYEES,
            dict(name=name, age=age, department=department, **extra),
        )

    def add_department(self, department_name):
        return self.insert_row(DEPARTMENTS, dict(department_name=department_name))

    def select(self, filter_by=None, table=EMPLOYEES, order_by=None):
        """
        Rows matching every ``{column: value}`` pair of ``filter_by``.

        The returned ``Result`` can be read once. Rows come back in the
        engine's own order unless ``order_by`` names columns.
        """
        self._check_open()
        table = self.table(table)
        stmt = sa.select(table).where(*build_criteria(table, filter_by))

        order_by = build_order_by(table, order_by)
        if order_by:
            stmt = stmt.order_by(*order_by)

        return self.execute(stmt)

    def update(self, filter_by, values, table=EMPLOYEES):
        self._check_open()
        table = self.table(table)
        stmt = (
            sa.update(table)
            .where(*build_criteria(table, filter_by))
            .values(build_values(table, values))
        )
        return self.execute(stmt).rowcount

    def delete(self, filter_by, table=EMPLOYEES):
        self._check_open()
        table = self.table(table)
        stmt = sa.delete(table).where(*build_criteria(table, filter_by))
        return self.execute(stmt).rowcount

    def select_with_departments(self):
        """
        Employees joined to the department row carrying the same name.
        Employees without a matching department are left out.
        """
        self._check_open()
        employees = self.table(EMPLOYEES)
        departments = self.table(DEPARTMENTS)

        stmt = sa.select(
            employees.c.id,
            employees.c.name,
            departments.c.department_id,
            departments.c.department_name,
        ).join_from(
            employees,
            departments,
            employees.c.department == departments.c.department_name,
        )
        return self.execute(stmt)


@contextmanager
def connect(path=None, **kwargs):
    """
    Open a runner on the database file at ``path`` and close it on every exit path.
    """
    runner = StatementRunner.open(path, **kwargs)
    try:
        yield runner
    finally:
        runner.close()

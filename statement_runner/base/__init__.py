from .commit import CommitMode
from .runner import StatementRunner, connect, create_sqlite_engine
from .schema import define_tables, EMPLOYEES, DEPARTMENTS

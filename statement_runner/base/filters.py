from sqlalchemy import Table
from sqlalchemy.exc import NoSuchColumnError, NoSuchTableError


def get_table(metadata, table):
    if isinstance(table, Table):
        return table

    try:
        return metadata.tables[table]
    except KeyError:
        raise NoSuchTableError(table) from None


def get_column(table: Table, name):
    # SQLite reads an unknown double-quoted identifier as a string literal,
    # so unknown names have to be rejected before any SQL is emitted.
    column = table.c.get(name)
    if column is None:
        raise NoSuchColumnError(f"Table '{table.name}' has no column '{name}'")
    return column


def build_criteria(table: Table, filter_by):
    """
    Turn a ``{column: value}`` mapping into equality criteria, ANDed by ``where()``.
    A ``None`` value matches NULL.
    """
    criteria = []
    for name, value in (filter_by or {}).items():
        column = get_column(table, name)
        if value is None:
            criteria.append(column.is_(None))
        else:
            criteria.append(column == value)
    return criteria


def build_values(table: Table, values):
    return {
        get_column(table, name).name: value
        for name, value in values.items()
    }


def build_order_by(table: Table, order_by):
    """
    Column names to ORDER BY clauses; a leading ``-`` sorts descending.
    """
    if order_by is None:
        return []

    if isinstance(order_by, str):
        order_by = [order_by]

    clauses = []
    for name in order_by:
        if name.startswith("-"):
            clauses.append(get_column(table, name[1:]).desc())
        else:
            clauses.append(get_column(table, name).asc())
    return clauses

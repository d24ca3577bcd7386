from sqlalchemy import MetaData, Table, Column, Integer, Text

EMPLOYEES = "employees"
DEPARTMENTS = "departments"


def define_tables(metadata=None):
    """
    Declare the ``employees`` and ``departments`` tables on ``metadata``.

    A fresh ``MetaData`` is created when none is given, so every runner can
    alter or reflect its own definitions without affecting another one.
    Employees and departments are only correlated by name
    (``employees.department = departments.department_name``), there is no
    foreign key between them.
    """
    if metadata is None:
        metadata = MetaData()

    Table(
        EMPLOYEES, metadata,
        Column("id", Integer, primary_key=True),
        Column("name", Text, nullable=False),
        Column("age", Integer),
        Column("department", Text),
    )

    Table(
        DEPARTMENTS, metadata,
        Column("department_id", Integer, primary_key=True),
        Column("department_name", Text, nullable=False),
    )

    return metadata

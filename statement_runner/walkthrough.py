from .base import statements as sql
from .logger import logger


def _show(emit, title, rows):
    emit(title)
    for row in rows:
        emit(f"  {tuple(row)}")
    return rows


def run_walkthrough(runner, emit=print, cleanup=False):
    """
    The linear tutorial script: create the tables, insert, select, update,
    delete, alter and join, committing after every change. Returns the employees
    left at the end.
    """
    logger.debug("Starting walkthrough")

    emit("Creating tables")
    runner.run([sql.CREATE_EMPLOYEES, sql.CREATE_DEPARTMENTS])

    emit("Inserting Alice and Bob")
    runner.execute(sql.INSERT_EMPLOYEE, ("Alice", 30, "HR"))
    runner.execute(sql.INSERT_EMPLOYEE, ("Bob", 25, "Engineering"))
    runner.commit()
    _show(emit, "All employees:", runner.execute(sql.SELECT_EMPLOYEES).all())

    emit("Updating Alice's age to 31")
    runner.execute(sql.UPDATE_AGE_BY_NAME, (31, "Alice"))
    runner.commit()
    _show(emit, "Alice:", runner.execute(sql.SELECT_EMPLOYEES_BY_NAME, ("Alice",)).all())

    emit("Deleting Bob")
    runner.execute(sql.DELETE_EMPLOYEE_BY_NAME, ("Bob",))
    runner.commit()
    remaining = _show(emit, "All employees:", runner.execute(sql.SELECT_EMPLOYEES).all())

    columns = runner.execute(sql.SELECT_EMPLOYEE_COLUMNS).scalars().all()
    if "email" in columns:
        emit("Email column already present")
    else:
        emit("Adding email column")
        runner.execute(sql.ADD_EMAIL_COLUMN)
        runner.commit()

    runner.execute(sql.UPDATE_EMAIL_BY_NAME, ("alice@example.com", "Alice"))
    runner.commit()
    _show(emit, "Employee emails:", runner.execute(sql.SELECT_EMPLOYEE_EMAILS).all())

    emit("Adding departments")
    runner.run([
        (sql.INSERT_DEPARTMENT, ("HR",)),
        (sql.INSERT_DEPARTMENT, ("Engineering",)),
    ])
    runner.commit()
    _show(emit, "Employees with their department:", runner.execute(sql.SELECT_EMPLOYEE_DEPARTMENTS).all())

    if cleanup:
        emit("Dropping tables")
        runner.run([sql.DROP_EMPLOYEES, sql.DROP_DEPARTMENTS])
        runner.commit()

    return remaining

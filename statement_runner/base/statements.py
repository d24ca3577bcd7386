"""
The tutorial's SQL statements, one per statement kind.

User-supplied values always go through positional ``?`` placeholders; pass
them to ``StatementRunner.execute`` as a tuple.
"""

CREATE_EMPLOYEES = """
CREATE TABLE IF NOT EXISTS employees (
    id INTEGER PRIMARY KEY,
    name TEXT NOT NULL,
    age INTEGER,
    department TEXT
)
"""

CREATE_DEPARTMENTS = """
CREATE TABLE IF NOT EXISTS departments (
    department_id INTEGER PRIMARY KEY,
    department_name TEXT NOT NULL
)
"""

INSERT_EMPLOYEE = "INSERT INTO employees (name, age, department) VALUES (?, ?, ?)"

INSERT_DEPARTMENT = "INSERT INTO departments (department_name) VALUES (?)"

SELECT_EMPLOYEES = "SELECT id, name, age, department FROM employees"

SELECT_EMPLOYEES_BY_NAME = "SELECT id, name, age, department FROM employees WHERE name = ?"

UPDATE_AGE_BY_NAME = "UPDATE employees SET age = ? WHERE name = ?"

DELETE_EMPLOYEE_BY_NAME = "DELETE FROM employees WHERE name = ?"

ADD_EMAIL_COLUMN = "ALTER TABLE employees ADD COLUMN email TEXT"

SELECT_EMPLOYEE_COLUMNS = "SELECT name FROM pragma_table_info('employees')"

UPDATE_EMAIL_BY_NAME = "UPDATE employees SET email = ? WHERE name = ?"

SELECT_EMPLOYEE_EMAILS = "SELECT name, email FROM employees"

SELECT_EMPLOYEE_DEPARTMENTS = """
SELECT employees.name, departments.department_name
FROM employees
INNER JOIN departments ON employees.department = departments.department_name
"""

DROP_EMPLOYEES = "DROP TABLE IF EXISTS employees"

DROP_DEPARTMENTS = "DROP TABLE IF EXISTS departments"

from sqlalchemy.sql.elements import TextClause


def _leading_keyword(sql):
    for line in sql.splitlines():
        line = line.strip()
        if not line or line.startswith("--"):
            continue
        return line.split(None, 1)[0].rstrip(";").upper()
    return ""


def statement_kind(statement):
    """
    Leading SQL keyword of a statement, e.g. ``SELECT`` or ``ALTER``.

    Works on raw SQL strings, ``text()`` clauses and Core constructs
    (``create_table`` visits as ``CREATE``).
    """
    if isinstance(statement, str):
        return _leading_keyword(statement)

    if isinstance(statement, TextClause):
        return _leading_keyword(statement.text)

    visit_name = getattr(statement, "__visit_name__", None)
    if visit_name is None:
        return type(statement).__name__.upper()

    return visit_name.split("_", 1)[0].upper()


def iter_statements(statements):
    """
    Yield ``(statement, params)`` pairs from a sequence mixing bare statements
    and ``(statement, params)`` tuples.
    """
    for item in statements:
        if isinstance(item, tuple):
            if len(item) != 2:
                raise ValueError(f"Expected (statement, params), got a {len(item)}-tuple")
            yield item
        else:
            yield item, None

from enum import Enum


class CommitMode(str, Enum):
    """
    When mutating statements are committed.

    ``AUTO`` commits after every successful mutating statement and rolls the
    statement back when the engine rejects it. ``MANUAL`` leaves pending work
    open until ``commit()`` is called or a ``batch()`` block ends.
    """
    AUTO = "auto"
    MANUAL = "manual"

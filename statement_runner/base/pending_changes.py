from collections import Counter


class PendingChanges:
    """
    Mutating statements executed on a connection since its last commit.
    """
    def __init__(self):
        self._statements = Counter()
        self._rowcount = 0

    def clear(self):
        self.rollback()

    def rollback(self):
        self._statements.clear()
        self._rowcount = 0

    def record(self, kind, rowcount):
        self._statements[kind] += 1

        # DDL reports -1
        if rowcount > 0:
            self._rowcount += rowcount

    @property
    def dirty(self):
        return bool(self._statements)

    @property
    def rowcount(self):
        return self._rowcount

    @property
    def statement_count(self):
        return sum(self._statements.values())

    def __str__(self):
        if not self._statements:
            return "no pending statements"

        kinds = ", ".join(f"{count} {kind}" for kind, count in self._statements.items())
        return f"{kinds} ({self._rowcount} rows)"

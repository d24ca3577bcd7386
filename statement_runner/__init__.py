from .base.commit import CommitMode
from .base.runner import StatementRunner, connect

__all__ = [
    "CommitMode",
    "StatementRunner",
    "connect",
]

__version__ = '0.1.0'

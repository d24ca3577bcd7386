import argparse

from .base.commit import CommitMode
from .base.runner import connect
from .config import get_settings
from .logger import configure_logging
from .walkthrough import run_walkthrough


def main(argv=None):
    settings = get_settings()

    parser = argparse.ArgumentParser(
        prog="statement_runner",
        description="Run the employees walkthrough against a SQLite database file.",
    )
    parser.add_argument("--db", default=settings.database_path, help="database file, created if absent")
    parser.add_argument("--commit-mode", choices=[m.value for m in CommitMode], default=settings.commit_mode.value)
    parser.add_argument("--echo", action="store_true", default=settings.echo, help="log every emitted SQL statement")
    parser.add_argument("--log-level", default=settings.log_level)
    parser.add_argument("--cleanup", action="store_true", help="drop the tables once done")
    args = parser.parse_args(argv)

    configure_logging(args.log_level)

    with connect(args.db, commit_mode=args.commit_mode, echo=args.echo) as runner:
        remaining = run_walkthrough(runner, cleanup=args.cleanup)

    print(f"{len(remaining)} employee(s) left in {args.db}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())

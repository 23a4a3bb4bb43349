import sys

from .logging_utils import setup_logging
from .pipeline import run_job_safely


def main() -> int:
    setup_logging()

    fact = run_job_safely()
    return 0 if fact is not None else 1


if __name__ == "__main__":
    sys.exit(main())

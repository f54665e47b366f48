"""Run the Holiday Calendar API.

Intended to be executed from the project root, for example in Docker
where only a single Python file is specified::

    MONGO_URI=mongodb://localhost:27017 python run.py
"""
import sys

from holiday_calendar_api.server import main


if __name__ == "__main__":
    try:
        sys.exit(main())
    except KeyboardInterrupt:
        pass

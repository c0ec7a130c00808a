#!/usr/bin/env python3
"""Basic usage example"""

from hierlog import LoggerBuilder, Level, basic_config, get_logger
from hierlog.formatters import DetailedFormatter
from hierlog.handlers import MemoryHandler


def main():
    basic_config(level=Level.DEBUG, formatter=DetailedFormatter(timestamp_format="time"))

    # Loggers without handlers use the global console handler and propagate
    app = get_logger("app")
    db = app.get_child("db")
    db.info("Connected")

    # Builder: own level and handlers; records stop propagating here
    memory = MemoryHandler(max_records=100)
    worker = (LoggerBuilder()
        .with_name("app.worker")
        .with_level(Level.INFO)
        .with_console(colored=True)
        .add_handler(memory)
        .build())

    worker.debug("Not shown")
    worker.info("Job started", extra={"job_id": 42})
    try:
        1 / 0
    except ZeroDivisionError:
        worker.exception("Job failed")

    print(f"Captured {len(memory)} records, "
          f"{len(memory.get_records_by_level(Level.ERROR))} errors")


if __name__ == "__main__":
    main()

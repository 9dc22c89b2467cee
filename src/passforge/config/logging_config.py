import logging
import os
import sys
import traceback
import pendulum

from passforge.config.config_passforge import BASE_DIR

LOG_FILE = "error.log"


def setup_logging(log_dir=BASE_DIR, level=logging.ERROR) -> str | None:
    """
    Send log records to <log_dir>/error.log and log uncaught exceptions.

    Does nothing if the root logger already writes to that file.

    Returns:
        Path of the log file, or None if logging was already configured.
    """
    root = logging.getLogger()
    log_path = os.path.abspath(os.path.join(log_dir, LOG_FILE))
    if any(getattr(h, "baseFilename", None) == log_path for h in root.handlers):
        return None  # already configured

    os.makedirs(log_dir, exist_ok=True)

    handler = logging.FileHandler(log_path, mode="a", encoding="utf-8")
    handler.setFormatter(logging.Formatter("%(levelname)s %(name)s %(message)s"))
    root.addHandler(handler)
    root.setLevel(level)

    sys.excepthook = log_uncaught_exceptions
    return log_path


def log_uncaught_exceptions(exctype, value, tb):
    if issubclass(exctype, KeyboardInterrupt):
        print("\n Stopped.", file=sys.stderr)
        return

    now = pendulum.now().to_iso8601_string()

    frames = [
        f'  File "{os.path.basename(frame.filename)}", line {frame.lineno}, in {frame.name}'
        for frame in traceback.extract_tb(tb)
    ]
    trace_summary = "\n".join(frames) if frames else "  <no traceback>"
    error_msg = f"{exctype.__name__}: {value}"

    logging.getLogger("passforge").error(
        f"[{now}] Uncaught exception: {error_msg}\n"
        f"Traceback (most recent call last):\n"
        f"{trace_summary}\n"
    )

    print("\nError! Something went wrong.", file=sys.stderr)
    print(f"Details saved to {LOG_FILE}\n", file=sys.stderr)

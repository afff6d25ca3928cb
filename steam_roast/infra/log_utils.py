import sys
from datetime import datetime, timezone

from steam_roast.config import settings


def log_message(msg: str, level: str = "INFO") -> None:
    """Append a timestamped message to the roast history log."""
    log_file = settings.log_path
    line = f"[{datetime.now(timezone.utc).isoformat()}] [{level}] {msg}\n"
    try:
        log_file.parent.mkdir(parents=True, exist_ok=True)
        with open(log_file, "a", encoding="utf-8") as f:
            f.write(line)
    except OSError as e:
        # A broken log file must never take a roast down with it
        print(f"log write failed ({e}): {line}", end="", file=sys.stderr)

import sys
from datetime import datetime
from pathlib import Path
from typing import Optional

from loguru import logger


def setup_logging(root: Optional[str], level: str = "INFO"):
    logger.remove()
    if root:
        logdir = Path(root) / datetime.now().strftime("%Y/%m/%d")
        logdir.mkdir(parents=True, exist_ok=True)
        logfile = logdir / "app.log"
        logger.add(
            str(logfile),
            rotation="00:00",
            retention="14 days",
            level=level,
            enqueue=True,
            backtrace=True,
            diagnose=True,
        )
    # consola a stderr: stdout queda para la salida del CLI (p.ej. --json)
    logger.add(lambda m: print(m, end="", file=sys.stderr), level=level)
    return logger

from __future__ import annotations

import logging
from typing import Any, Dict, Optional


def setup_logger(name: str = "edges", cfg: Optional[Dict[str, Any]] = None) -> logging.Logger:
    """
    Attach a stream handler to `name` and set its level from
    cfg["logging"]["level"]. Meant for scripts; operator modules only call
    logging.getLogger("edges.<op>") and propagate here.
    """
    logger = logging.getLogger(name)
    if not logger.handlers:
        handler = logging.StreamHandler()
        handler.setFormatter(
            logging.Formatter("%(asctime)s [%(name)s] %(levelname)s: %(message)s")
        )
        logger.addHandler(handler)
    level = (cfg or {}).get("logging", {}).get("level", "INFO")
    logger.setLevel(level)
    return logger

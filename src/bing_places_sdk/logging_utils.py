from __future__ import annotations

import json
import logging
from datetime import datetime, timezone


def log_operation(
    logger: logging.Logger,
    operation: str,
    environment: str,
    tracking_id: str | None,
    duration_ms: int,
    outcome: str,
    status_code: int | None = None,
) -> None:
    level = logging.INFO if outcome != "error" else logging.WARNING
    logger.log(
        level,
        json.dumps(
            {
                "ts": datetime.now(timezone.utc).isoformat(),
                "level": logging.getLevelName(level),
                "operation": operation,
                "environment": environment,
                "tracking_id": tracking_id,
                "duration_ms": duration_ms,
                "status_code": status_code,
                "outcome": outcome,
            }
        ),
    )

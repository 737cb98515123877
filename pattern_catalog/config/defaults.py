# pattern_catalog/config/defaults.py
from typing import Any, Dict

DEFAULT_CONFIG: Dict[str, Any] = {
    "version": "1.0.0",
    "debug": False,
    "logging": {
        "level": "${LOG_LEVEL:WARNING}",
        "destination": "${LOG_DESTINATION:console}",
        "file": {
            "path": "${PATTERN_CATALOG_LOGDIR:logs}/pattern_catalog.log",
            "max_size_mb": 10,
            "backup_count": 5,
        },
    },
}

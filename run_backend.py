#!/usr/bin/env python
"""Script to run the task manager backend server."""
import sys
from pathlib import Path

# Make the task_manager package importable without installing it
sys.path.insert(0, str(Path(__file__).resolve().parent))

import uvicorn

from task_manager.config import HOST, LOG_DIR, LOG_LEVEL, PORT
from task_manager.logging_setup import setup_logging

if __name__ == "__main__":
    setup_logging(log_dir=LOG_DIR, console_level=LOG_LEVEL)
    uvicorn.run(
        "task_manager.main:app",
        host=HOST,
        port=PORT,
        log_config=None,
    )

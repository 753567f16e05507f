# config.example.py

"""
Documentation-only module (safe to commit).

The real configuration is loaded from environment variables (optionally via a local .env file).
This file exists to make the repo self-documenting even without opening .env.
"""

ENV_VARS = {
    # App / logging
    "TASKSHELF_APP_NAME": "App display name (default: taskshelf).",
    "TASKSHELF_LOG_LEVEL": "Console logging level (default: WARNING, keeps menus readable).",
    "TASKSHELF_LOG_TO_FILE": "Write full DEBUG logs to <data_dir>/taskshelf.log (true/false, default: true).",
    # Paths
    "TASKSHELF_DATA_DIR": "Data directory (default: current working directory).",
    "TASKSHELF_TASKS_PATH": "Task store JSON path (default: <data_dir>/tasks.json).",
    "TASKSHELF_LIBRARY_PATH": "Library store JSON path (default: <data_dir>/library.json).",
}

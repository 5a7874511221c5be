# config.example.py

"""
Documentation-only module (safe to commit).

The real configuration is loaded from environment variables (optionally via a local .env file).
Do NOT commit credentials embedded in a connection string. Use .env (local, gitignored).

This file exists to make the repo self-documenting even without opening .env.example.
"""

ENV_VARS = {
    # Document store
    "TASKER_MONGO_URI": "MongoDB connection string (default: mongodb://localhost:27017).",
    "MONGO_URI": "Fallback connection string when TASKER_MONGO_URI is unset.",
    "TASKER_DATABASE": "Database name (default: tasker).",
    "TASKER_COLLECTION": "Collection holding the tasks (default: task).",
    "TASKER_SERVER_TIMEOUT_MS": "Server selection timeout in ms (default: driver default).",
    # Logging
    "TASKER_LOG_LEVEL": "Console logging level (default: WARNING).",
    "TASKER_LOG_FILE_ENABLED": "Write DEBUG logs to <data_dir>/tasker.log (true/false).",
    "TASKER_DATA_DIR": "Local data directory (default: ~/.local/share/tasker).",
    # Presentation
    "TASKER_COLOR": "Colorize listings when stdout is a terminal (true/false).",
}

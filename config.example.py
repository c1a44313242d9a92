# config.example.py

"""
Documentation-only module (safe to commit).

The real configuration is loaded from environment variables (optionally via a local .env file).

This file exists to make the repo self-documenting even without opening .env.example.
"""

ENV_VARS = {
    # App / logging
    "TODO_APP_NAME": "App display name (default: todo).",
    "TODO_LOG_LEVEL": "Console logging level (default: INFO). The log file always gets DEBUG.",
    # Connectors
    "TODO_CONSOLE_ENABLED": "Run the interactive console (true/false, default: true).",
    # Initial list
    "TODO_SEED_TASKS": "Comma separated task names added at startup, in order (default: empty).",
    # Paths (gitignored)
    "TODO_DATA_DIR": "Local data directory holding todo.log (default: .local/todo).",
}

# config.example.py

"""
Documentation-only module (safe to commit).

The real configuration is loaded from environment variables (optionally via a local .env file).

This file exists to make the repo self-documenting even without opening .env.example.
"""

ENV_VARS = {
    # App / logging
    "TASKPULSE_APP_NAME": "Server display name (default: taskpulse).",
    "TASKPULSE_LOG_LEVEL": "Console logging level (default: INFO).",
    "TASKPULSE_DATA_DIR": "Local directory for the log file (default: .local/taskpulse).",
    # Front ends
    "TASKPULSE_CONSOLE_ENABLED": "Run the interactive console instead of the MCP server (true/false).",
    "TASKPULSE_TRANSPORT": "MCP transport: stdio | sse | streamable-http (default: stdio).",
    "TASKPULSE_HOST": "Bind host for the HTTP transports (default: 127.0.0.1).",
    "TASKPULSE_PORT": "Bind port for the HTTP transports (default: 8000).",
    # Tools
    "TASKPULSE_WIDGET_BASE_URL": (
        "Base URL used for task links in search/fetch results "
        "(default: http://localhost:8000/widgets)."
    ),
    "TASKPULSE_SEARCH_LIMIT": "How many tasks search looks through (default: 50).",
    # Store
    "TASKPULSE_SEED_SAMPLE_DATA": "Load the demo tasks at start-up (true/false, default: true).",
}

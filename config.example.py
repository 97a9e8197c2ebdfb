# config.example.py

"""
Documentation-only module (safe to commit).

The real configuration is loaded from environment variables (optionally via a local .env file).
This file exists to make the repo self-documenting even without opening .env.example.
"""

ENV_VARS = {
    # App / logging
    "TASKLIST_APP_NAME": "App display name (default: tasklist).",
    "TASKLIST_LOG_LEVEL": "Console logging level (default: INFO).",
    "TASKLIST_DATA_DIR": "Local data directory for logs (default: .local/tasklist).",
    # Initial load
    "TASKLIST_SOURCE_ENABLED": "Fetch the initial task list over HTTP (true/false, default: true).",
    "TASKLIST_SOURCE_URL": (
        "URL returning a JSON list of tasks (default: https://jsonplaceholder.typicode.com/todos)."
    ),
    "TASKLIST_LOAD_TIMEOUT_SECONDS": "HTTP timeout for the initial load (default: 10).",
    "TASKLIST_LOAD_RETRIES": "Extra attempts after a failed initial load (default: 0).",
    "TASKLIST_LOAD_RETRY_DELAY_SECONDS": "First retry delay, doubled per attempt (default: 0.5).",
    # View
    "TASKLIST_PAGE_SIZE": "Rows per page in the task table (default: 10).",
}

# config.example.py

"""
Documentation-only module (safe to commit).

The real configuration is loaded from environment variables (optionally via a local .env file).
This file exists to make the repo self-documenting without opening the config module.
"""

ENV_VARS = {
    # App / logging
    "QUEST_APP_NAME": "App display name (default: quest-checklist).",
    "QUEST_LOG_LEVEL": "Console logging level (default: INFO). The log file always gets DEBUG.",
    "QUEST_CONSOLE_ENABLED": "Run the console REPL (true/false, default: true).",
    # Local data
    "QUEST_DATA_DIR": "Directory for the store and checklist.log (default: .local/quest).",
    "QUEST_STORE_PATH": "SQLite key-value store file (default: <data_dir>/checklist.sqlite3).",
    "QUEST_STORAGE_KEY": "Key holding the task list (default: game-progress-tracker-tasks).",
    # Vocabulary
    "QUEST_CATEGORIES": "Comma separated category labels (default: the seven built-in labels).",
    "QUEST_ALL_CATEGORY": "Filter value meaning 'every category' (default: ALL).",
    "QUEST_DEFAULT_CATEGORY": "Category for tasks added without one (default: その他).",
    "QUEST_TITLE_MAX_LENGTH": "Titles are clipped to this many characters (default: 100).",
}

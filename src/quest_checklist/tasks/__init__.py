"""
Task subsystem.

Components:
- task_models.py: data structures (Task, TaskStatus) and record migration
- mutations.py: pure commands over the canonical tuple (+ single-slot undo)
- sorting.py: order-freezing status sort (Unsorted / Sorted state machine)
- filtering.py: category projection
- task_store.py: SQLite key-value store + JSON load/save of the collection
- manager.py: TaskCollectionManager, the boundary used by the UI
"""

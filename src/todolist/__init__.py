"""
todolist: a small single-user command-line task list.

Subpackages:
- tasks/: Task model, TaskStore (dense ids), HistoryManager (bounded undo)
- core/: CommandEngine, persistence port, error hierarchy
- storage/: JSON file repository (atomic saves)
- cli/: command registry, rendering, entry point
"""

__version__ = "0.1.0"
__license__ = "MIT"

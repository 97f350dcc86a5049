"""Quest Checklist: a personal game-progress checklist with local persistence."""

__version__ = "0.1.0"

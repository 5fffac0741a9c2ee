"""Life Manage API: chat-history projects, tasks and notes."""

__version__ = "1.0.0"

from .task import Task, utcnow

# Export all models for easy importing
__all__ = ["Task", "utcnow"]

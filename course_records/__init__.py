"""course-records — per-student course records with CSV persistence."""

__version__ = "0.1.0"

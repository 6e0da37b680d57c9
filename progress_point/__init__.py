"""Progress Point - student records backend (leaderboards, attendance, marks)"""

__version__ = "1.0.0"

"""
Clinic Appointment Registry

An in-memory registry of health professionals and patient appointments,
with field validation, conflict detection and cancellation, served
through a FastAPI application.
"""

__version__ = "1.0.0"

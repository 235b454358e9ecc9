"""
Medibook

A FastAPI service for scheduling, tracking and reporting on clinic
appointments between patients and doctors.
"""

__version__ = "1.0.0"

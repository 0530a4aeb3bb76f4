"""
env-therapist: diagnose environment variables and .env file conflicts.
"""

__version__ = "1.0.0"

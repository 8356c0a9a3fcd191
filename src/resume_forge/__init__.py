"""Build themed resumes in many formats from FRESH or JSON Resume sources."""

__version__ = "0.4.0"

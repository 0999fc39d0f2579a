"""Presentation layer - process entry points.

Structure:
- jobs/: console entry points for scheduled jobs

The presentation layer resolves handlers from the container and contains
NO business logic.
"""

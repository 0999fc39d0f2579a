"""Process entry points for scheduled jobs."""

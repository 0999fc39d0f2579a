"""Application layer - Use cases and orchestration.

This layer contains the application's use cases following the CQRS pattern:
- Commands: Write operations that change state (and emit notifications)
- Queries: Read operations for the notification center
- Jobs: Scheduled scans that emit notifications

Structure:
- commands/: Command dataclasses and handlers (write operations)
- queries/: Query dataclasses and handlers (read operations)
- jobs/: Periodic jobs (session reminder scan)
- errors/: ApplicationError returned inside Failure results

The application layer orchestrates domain logic but contains no business rules.
"""

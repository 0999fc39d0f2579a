"""Infrastructure layer - Adapters and external integrations.

This layer contains implementations of domain protocols (ports):
- Database repositories (SQLAlchemy, PostgreSQL or SQLite)
- Email transports (stub, SMTP) and message rendering
- The in-memory event bus and the notification delivery handlers
- Structured logging

Structure:
- persistence/: Database, models and repositories
- email/: EmailProtocol adapters and Jinja2 templates
- events/: Event bus and delivery handlers
- logging/: LoggerProtocol adapters

The infrastructure layer depends on the domain layer (implements protocols)
but the domain layer does NOT depend on infrastructure.
"""

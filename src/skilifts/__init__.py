"""SkiLifts CRUD API over a single-table DynamoDB design."""

__version__ = "1.0.0"

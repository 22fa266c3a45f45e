"""Database engine, schema migration and repositories."""

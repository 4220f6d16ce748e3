"""Infrastructure layer: persistence (SQLAlchemy models, repositories, migrations)."""

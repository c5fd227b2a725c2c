"""Monthly report records served as server-rendered HTML (FastAPI + SQLAlchemy)."""

"""
Infrastructure layer.

SQLAlchemy repositories and mappers implementing the application
protocols, plus the FastAPI routers and schemas.
"""

"""
blog_service tests

Covers the backend of the blog service:

- FastAPI application and exception mapping (`main.py`)
- SQLAlchemy models and database integration (`models.py`, `db.py`)
- Password hashing, JWT issuance and the authentication gate (`auth.py`)
- Post, comment, auth and health routes (`routes/`)
"""

# eventbook/db/base_class.py

from sqlalchemy.orm import declarative_base

# Every SQLAlchemy model in the project inherits from this class.
Base = declarative_base()

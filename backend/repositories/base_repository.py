"""
Base repository providing common key-addressed operations.
"""

from typing import Generic, TypeVar, Optional, Type
from sqlalchemy.orm import Session

T = TypeVar('T')


class BaseRepository(Generic[T]):
    """
    Generic base repository for models keyed by a string primary key.
    All specific repositories should inherit from this class.
    """

    def __init__(self, db: Session, model: Type[T]):
        """
        Initialize the repository.

        Args:
            db: SQLAlchemy database session
            model: SQLAlchemy model class with a ``key`` primary key column
        """
        self.db = db
        self.model = model

    def get_by_key(self, key: str) -> Optional[T]:
        """
        Retrieve a record by its key.

        Args:
            key: Primary key value

        Returns:
            Model instance or None if not found
        """
        return self.db.get(self.model, key)

    def merge(self, obj: T) -> T:
        """
        Insert or update a record by primary key.

        Args:
            obj: Model instance to store

        Returns:
            Persistent model instance
        """
        merged = self.db.merge(obj)
        self.db.flush()
        return merged

    def delete_by_key(self, key: str) -> bool:
        """
        Delete a record by its key.

        Args:
            key: Primary key value

        Returns:
            True if deleted, False if not found
        """
        obj = self.get_by_key(key)
        if obj is None:
            return False
        self.db.delete(obj)
        self.db.flush()
        return True

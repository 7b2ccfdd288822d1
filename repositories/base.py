"""
Base repository interface for data access layer.
This follows the Repository pattern to separate business logic from data access.

Every table in this application carries ``id`` and ``user_id`` columns; the
user-scoped helpers filter on both so callers never see another user's rows.
"""

from typing import Any, Dict, Generic, List, Optional, Type, TypeVar
from sqlalchemy.orm import Session
from abc import ABC

ModelType = TypeVar("ModelType")


class BaseRepository(Generic[ModelType], ABC):
    """
    Base repository providing common CRUD operations.
    All repositories should inherit from this class.
    """

    def __init__(self, db: Session, model: Type[ModelType]):
        self.db = db
        self.model = model

    def get_by_id_and_user(self, entity_id: str, user_id: str) -> Optional[ModelType]:
        """Get entity by ID only if it belongs to the given user"""
        return (
            self.db.query(self.model)
            .filter(self.model.id == entity_id, self.model.user_id == user_id)
            .first()
        )

    def list_by_user(self, user_id: str) -> List[ModelType]:
        """Get all entities owned by a user (unordered)"""
        return self.db.query(self.model).filter(self.model.user_id == user_id).all()

    def create(self, entity: ModelType) -> ModelType:
        """Create new entity"""
        self.db.add(entity)
        self.db.commit()
        self.db.refresh(entity)
        return entity

    def update_by_id_and_user(
        self, entity_id: str, user_id: str, values: Dict[str, Any]
    ) -> int:
        """
        Write the given column values to the user's entity.

        Returns the number of rows updated; zero when the row vanished between
        the caller's read and this write.
        """
        count = (
            self.db.query(self.model)
            .filter(self.model.id == entity_id, self.model.user_id == user_id)
            .update(values, synchronize_session=False)
        )
        self.db.commit()
        return count

    def delete_by_id_and_user(self, entity_id: str, user_id: str) -> int:
        """Delete the user's entity; returns the number of rows deleted"""
        count = (
            self.db.query(self.model)
            .filter(self.model.id == entity_id, self.model.user_id == user_id)
            .delete(synchronize_session=False)
        )
        self.db.commit()
        return count


"""
Database storage for recipes.
"""

from typing import List, Optional

from sqlalchemy import select
from sqlalchemy.engine import Engine
from sqlalchemy.orm import Session

from .database import create_db_engine, session_factory
from .db_models import Base, Recipe


class RecipeStorage:
    """Database-backed recipe storage (SQLite or PostgreSQL)."""

    def __init__(self, engine: Optional[Engine] = None, env: Optional[str] = None):
        """
        Initialize recipe storage.

        Args:
            engine: SQLAlchemy engine; if None, one is created for ``env``
            env: Environment name used when no engine is given
        """
        self._engine = engine or create_db_engine(env)
        Base.metadata.create_all(self._engine)
        self._Session = session_factory(self._engine)

    def _get_session(self) -> Session:
        """Get a new database session."""
        return self._Session()

    def save_recipe(self, name: str, description: Optional[str] = None) -> dict:
        """
        Insert a recipe.

        Raises:
            ValueError: If name is empty
        """
        if not name or not name.strip():
            raise ValueError("Recipe name is required")

        with self._get_session() as session:
            recipe = Recipe(name=name.strip(), description=description)
            session.add(recipe)
            session.commit()
            session.refresh(recipe)
            return recipe.to_dict()

    def get_recipe(self, recipe_id: int) -> Optional[dict]:
        """Get a recipe by id."""
        with self._get_session() as session:
            recipe = session.get(Recipe, recipe_id)
            return recipe.to_dict() if recipe else None

    def list_recipes(self, limit: int = 50) -> List[dict]:
        """Most recently created recipes first."""
        with self._get_session() as session:
            stmt = select(Recipe).order_by(Recipe.created_at.desc(), Recipe.id.desc()).limit(limit)
            return [r.to_dict() for r in session.scalars(stmt)]

    def close(self):
        """Dispose of the engine's connections."""
        self._engine.dispose()

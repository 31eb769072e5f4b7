"""
Observation repository over the local SQLite store.

Every operation opens its own session and commits immediately; there are
no transactions spanning several calls. Filtering by category, importance
or planet is done by the caller on the list returned by ``all()``.
"""

import logging
from typing import Callable, Iterable, Optional, Sequence

from sqlalchemy import select
from sqlalchemy.orm import sessionmaker

from store.models import Observation

logger = logging.getLogger(__name__)


class ObservationRepository:
    """
    Insert, delete and read observations.

    Usage:
        repository = ObservationRepository(init_database("sqlite:///:memory:"))
        repository.insert(observation)
        observations = repository.all()
    """

    def __init__(self, session_factory: sessionmaker):
        self._session_factory = session_factory

    def insert(self, observation: Observation) -> Observation:
        """
        Persist a new observation.

        Returns:
            The same observation with its identity and timestamps populated
        """
        with self._session_factory() as session:
            session.add(observation)
            session.commit()
            session.refresh(observation)

        logger.info(f"Observation inserted: id={observation.id}")
        return observation

    def get(self, observation_id: int) -> Optional[Observation]:
        """Fetch one observation by identity, or None if it does not exist."""
        with self._session_factory() as session:
            return session.get(Observation, observation_id)

    def all(self) -> list[Observation]:
        """Return every stored observation, in no particular order."""
        with self._session_factory() as session:
            return list(session.scalars(select(Observation)).all())

    def query(self, predicate: Callable[[Observation], bool]) -> list[Observation]:
        """Return the stored observations matching ``predicate``."""
        return [observation for observation in self.all() if predicate(observation)]

    def delete(self, observation: Observation) -> bool:
        """
        Delete an observation.

        Returns:
            True if a record was removed, False if it was already gone
        """
        return self._delete_ids([observation.id]) == 1

    def delete_at(self, indices: Iterable[int], observations: Sequence[Observation]) -> int:
        """
        Delete the observations at ``indices`` of an ordered sequence.

        Args:
            indices: Positions within ``observations``
            observations: The sequence the positions refer to (typically a
                filtered view shown to the user)

        Returns:
            Number of records removed

        Raises:
            IndexError: If an index is outside the sequence
        """
        ids = []
        for index in sorted(set(indices)):
            if index < 0 or index >= len(observations):
                raise IndexError(f"Observation index {index} out of range")
            ids.append(observations[index].id)

        return self._delete_ids(ids)

    def _delete_ids(self, ids: list[int]) -> int:
        removed = 0
        with self._session_factory() as session:
            for observation_id in ids:
                stored = session.get(Observation, observation_id)
                if stored is None:
                    logger.warning(f"Observation {observation_id} already deleted")
                    continue
                session.delete(stored)
                removed += 1
            session.commit()

        if removed:
            logger.info(f"Observations deleted: {removed}")
        return removed

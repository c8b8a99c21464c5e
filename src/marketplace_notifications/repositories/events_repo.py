"""Repository for subscription lifecycle events."""
import logging

from sqlalchemy import Select
from sqlalchemy.exc import NoResultFound, SQLAlchemyError
from sqlalchemy.orm import Session

from ..models.event import Event


class EventsRepository:
    """
    Repository for looking up subscription lifecycle events.
    """

    def __init__(self, session: Session):
        self.session = session

    def get_by_name(self, events_name: str) -> Event:
        """
        Get an event by its name.

        Args:
            events_name (str): The name of the event, e.g. "Activate".

        Returns:
            Event: The event object.

        Raises:
            NoResultFound: If no event has that name.
        """
        stmt: Select = Select(Event).where(Event.events_name == events_name)
        try:
            return self.session.execute(stmt).scalars().one()
        except NoResultFound:
            logging.error(f'No such event: {events_name}')
            raise
        except SQLAlchemyError as e:
            logging.error(f'Database error: {e}')
            self.session.rollback()
            raise

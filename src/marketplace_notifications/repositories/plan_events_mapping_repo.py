"""Repository for plan/event notification mappings."""
import logging
import uuid

from sqlalchemy import Select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from ..models.plan_event_mapping import PlanEventMapping


class PlanEventsMappingRepository:
    """
    Repository for the recipients configured per plan and event.
    """

    def __init__(self, session: Session):
        self.session = session

    def get_plan_event(self, plan_id: uuid.UUID, events_id: int) -> PlanEventMapping | None:
        """
        Get the mapping for a plan and an event.

        Args:
            plan_id (uuid.UUID): The plan identifier.
            events_id (int): The event identifier.

        Returns:
            PlanEventMapping | None: The mapping, or None if none is configured.
        """
        stmt: Select = (
            Select(PlanEventMapping)
            .where(PlanEventMapping.plan_id == plan_id)
            .where(PlanEventMapping.events_id == events_id)
        )
        try:
            mapping = self.session.execute(stmt).scalars().first()
        except SQLAlchemyError as e:
            logging.error(f'Database error: {e}')
            self.session.rollback()
            raise

        if mapping is None:
            logging.info(f"No event mapping configured for plan {plan_id} and event {events_id}.")
        return mapping

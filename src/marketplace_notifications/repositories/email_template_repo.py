"""Repository for email templates."""
import logging
import uuid

from sqlalchemy import Select
from sqlalchemy.exc import NoResultFound, SQLAlchemyError
from sqlalchemy.orm import Session

from ..config import (
    FAILURE_PROCESS_STATUS, FAILED_TEMPLATE_STATUS, SUBSCRIPTION_ID_TOKEN, SUBSCRIPTION_NAME_TOKEN,
    SUBSCRIPTION_STATUS_TOKEN, PLAN_ID_TOKEN, QUANTITY_TOKEN, CUSTOMER_NAME_TOKEN, CUSTOMER_EMAIL_TOKEN,
    PROCESS_STATUS_TOKEN
)
from ..models.email_template import EmailTemplate
from ..models.subscription import Subscription


class EmailTemplateRepository:
    """
    Repository for reading email templates and building subscription email bodies.
    """

    def __init__(self, session: Session):
        self.session = session

    def get_template_for_status(self, status: str) -> EmailTemplate | None:
        """
        Get the email template for a subscription status.

        Args:
            status (str): The status key, e.g. "Subscribed" or "Failed".

        Returns:
            EmailTemplate | None: The template, or None if none exists for the status.
        """
        stmt: Select = Select(EmailTemplate).where(EmailTemplate.status == status)
        try:
            template = self.session.execute(stmt).scalars().first()
        except SQLAlchemyError as e:
            logging.error(f'Database error: {e}')
            self.session.rollback()
            raise

        if template is None:
            logging.warning(f"No email template for status '{status}'.")
        return template

    def get_email_body_for_subscription(self, subscription_id: uuid.UUID, process_status: str) -> str:
        """
        Build the email body for a subscription by literal token replacement.

        The template is chosen the same way as the subject: the "Failed" template when the
        process failed, the template for the subscription's current status otherwise.

        Args:
            subscription_id (uuid.UUID): The marketplace subscription identifier.
            process_status (str): The outcome of the process that triggered the email.

        Returns:
            str: The body, or an empty string when no template is configured.

        Raises:
            NoResultFound: If the subscription does not exist.
        """
        stmt: Select = Select(Subscription).where(Subscription.amp_subscription_id == subscription_id)
        try:
            subscription: Subscription = self.session.execute(stmt).scalars().one()
        except NoResultFound:
            logging.error(f'No such subscription: {subscription_id}')
            raise
        except SQLAlchemyError as e:
            logging.error(f'Database error: {e}')
            self.session.rollback()
            raise

        if process_status == FAILURE_PROCESS_STATUS:
            template = self.get_template_for_status(FAILED_TEMPLATE_STATUS)
        else:
            template = self.get_template_for_status(subscription.subscription_status)

        if template is None or not template.template_body:
            return ""

        replacements = {
            SUBSCRIPTION_ID_TOKEN: subscription.amp_subscription_id,
            SUBSCRIPTION_NAME_TOKEN: subscription.name,
            SUBSCRIPTION_STATUS_TOKEN: subscription.subscription_status,
            PLAN_ID_TOKEN: subscription.amp_plan_id,
            QUANTITY_TOKEN: subscription.amp_quantity,
            CUSTOMER_NAME_TOKEN: subscription.customer_name,
            CUSTOMER_EMAIL_TOKEN: subscription.customer_email,
            PROCESS_STATUS_TOKEN: process_status,
        }
        body: str = template.template_body
        for token, value in replacements.items():
            body = body.replace(token, "" if value is None else str(value))

        logging.debug(f"Subscription {subscription_id}: Email body built from template '{template.status}'.")
        return body

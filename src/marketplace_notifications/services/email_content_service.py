"""Service for resolving the content and recipients of subscription notification emails."""
import logging
import uuid

from sqlalchemy.orm import Session

from ..config import (
    FAILURE_PROCESS_STATUS, FAILED_TEMPLATE_STATUS, SCHEDULER_EMAIL_TO_KEY, SUBSCRIPTION_NAME_TOKEN,
    SCHEDULER_TASK_NAME_TOKEN, RESPONSE_JSON_TOKEN, SMTP_FROM_EMAIL_KEY, SMTP_PASSWORD_KEY, SMTP_SSL_ENABLED_KEY,
    SMTP_USER_NAME_KEY, SMTP_PORT_KEY, SMTP_HOST_KEY
)
from ..exceptions import NoRecipientsError
from ..models.email import EmailContent
from ..models.smtp_settings import SmtpSettings
from ..repositories.application_config_repo import ApplicationConfigRepository
from ..repositories.email_template_repo import EmailTemplateRepository
from ..repositories.events_repo import EventsRepository
from ..repositories.plan_events_mapping_repo import PlanEventsMappingRepository
from ..utils.parsing import parse_bool, to_bool


class EmailContentService:
    """
    Service for preparing email content for subscription lifecycle and scheduler notifications.
    """

    def __init__(
            self,
            application_config_repo: ApplicationConfigRepository,
            email_template_repo: EmailTemplateRepository,
            events_repo: EventsRepository,
            plan_events_mapping_repo: PlanEventsMappingRepository,
            smtp_settings: SmtpSettings | None = None,
    ):
        """
        Initialize the EmailContentService class

        Args:
            application_config_repo: Configuration store accessor.
            email_template_repo: Email template accessor.
            events_repo: Event accessor.
            plan_events_mapping_repo: Plan/event mapping accessor.
            smtp_settings: SMTP settings validated at startup. When omitted, transport settings
                are read and parsed from the configuration store each time content is finalized.
        """
        self.application_config_repo = application_config_repo
        self.email_template_repo = email_template_repo
        self.events_repo = events_repo
        self.plan_events_mapping_repo = plan_events_mapping_repo
        self.smtp_settings = smtp_settings

    @classmethod
    def from_session(cls, session: Session, smtp_settings: SmtpSettings | None = None) -> "EmailContentService":
        """Build the service with database-backed repositories sharing one session."""
        return cls(
            application_config_repo=ApplicationConfigRepository(session),
            email_template_repo=EmailTemplateRepository(session),
            events_repo=EventsRepository(session),
            plan_events_mapping_repo=PlanEventsMappingRepository(session),
            smtp_settings=smtp_settings,
        )

    def prepare_email_content(
            self,
            subscription_id: uuid.UUID,
            plan_id: uuid.UUID,
            process_status: str,
            event_name: str,
            subscription_status: str,
    ) -> EmailContent:
        """
        Prepare the content of a subscription lifecycle email.

        Args:
            subscription_id (uuid.UUID): The subscription identifier.
            plan_id (uuid.UUID): The plan identifier.
            process_status (str): The process status; "failure" selects the "Failed" template.
            event_name (str): The name of the plan event, e.g. "Activate".
            subscription_status (str): The subscription status used to select the template.

        Returns:
            EmailContent: The resolved email content.

        Raises:
            NoRecipientsError: If no recipients are configured for the plan and event.
        """
        body: str = self.email_template_repo.get_email_body_for_subscription(subscription_id, process_status)
        subscription_event = self.events_repo.get_by_name(event_name)

        if process_status == FAILURE_PROCESS_STATUS:
            email_template = self.email_template_repo.get_template_for_status(FAILED_TEMPLATE_STATUS)
        else:
            email_template = self.email_template_repo.get_template_for_status(subscription_status)

        subject: str = ""
        copy_to_customer: bool = False
        to_recipients: str = ""
        cc_recipients: str = ""
        bcc_recipients: str = ""

        event_mapping = self.plan_events_mapping_repo.get_plan_event(plan_id, subscription_event.events_id)

        if event_mapping is not None:
            to_recipients = event_mapping.success_state_emails or ""
            copy_to_customer = to_bool(event_mapping.copy_to_customer)

        if not to_recipients:
            logging.error(
                f"Subscription {subscription_id}: No recipients configured for event '{event_name}' on plan {plan_id}."
            )
            raise NoRecipientsError()

        if email_template is not None:
            if to_recipients and email_template.cc:
                cc_recipients = email_template.cc

            if email_template.bcc:
                bcc_recipients = email_template.bcc

            subject = email_template.subject or ""

        logging.info(f"Subscription {subscription_id}: Prepared '{event_name}' email.")
        return self._finalize_content_email(
            subject, body, cc_recipients, bcc_recipients, to_recipients, copy_to_customer
        )

    def prepare_scheduler_email_content(
            self,
            scheduler_task_name: str,
            subscription_name: str,
            subscription_status: str,
            response_json: str,
    ) -> EmailContent:
        """
        Prepare the content of a scheduler report email.

        Args:
            scheduler_task_name (str): The name of the scheduler task that ran.
            subscription_name (str): The name of the subscription the task ran against.
            subscription_status (str): The status used to select the template.
            response_json (str): The JSON result of the task, inserted verbatim.

        Returns:
            EmailContent: The resolved email content.

        Raises:
            NoRecipientsError: If "SchedulerEmailTo" is not configured.
        """
        email_template = self.email_template_repo.get_template_for_status(subscription_status)
        to_recipients = self.application_config_repo.get_value_by_name(SCHEDULER_EMAIL_TO_KEY)

        if not to_recipients:
            logging.error(f"Scheduler task '{scheduler_task_name}': '{SCHEDULER_EMAIL_TO_KEY}' is not configured.")
            raise NoRecipientsError()

        body = (
            (email_template.template_body or "")
            .replace(SUBSCRIPTION_NAME_TOKEN, subscription_name)
            .replace(SCHEDULER_TASK_NAME_TOKEN, scheduler_task_name)
            .replace(RESPONSE_JSON_TOKEN, response_json)
        )

        logging.info(f"Scheduler task '{scheduler_task_name}': Prepared report for '{subscription_name}'.")
        return self._finalize_content_email(email_template.subject or "", body, "", "", to_recipients, False)

    def _finalize_content_email(
            self, subject: str, body: str, cc_emails: str, bcc_emails: str, to_emails: str, copy_to_customer: bool
    ) -> EmailContent:
        """Merge the resolved content with the SMTP transport settings."""
        if self.smtp_settings is not None:
            settings = self.smtp_settings
            return EmailContent(
                subject=subject,
                body=body,
                bcc_emails=bcc_emails,
                cc_emails=cc_emails,
                to_emails=to_emails,
                is_active=False,
                copy_to_customer=copy_to_customer,
                from_email=settings.from_email,
                password=settings.password,
                ssl=settings.ssl,
                user_name=settings.user_name,
                port=settings.port,
                smtp_host=settings.smtp_host,
            )

        config = self.application_config_repo
        return EmailContent(
            subject=subject,
            body=body,
            bcc_emails=bcc_emails,
            cc_emails=cc_emails,
            to_emails=to_emails,
            is_active=False,
            copy_to_customer=copy_to_customer,
            from_email=config.get_value_by_name(SMTP_FROM_EMAIL_KEY),
            password=config.get_value_by_name(SMTP_PASSWORD_KEY),
            ssl=parse_bool(config.get_value_by_name(SMTP_SSL_ENABLED_KEY)),
            user_name=config.get_value_by_name(SMTP_USER_NAME_KEY),
            port=int(config.get_value_by_name(SMTP_PORT_KEY)),
            smtp_host=config.get_value_by_name(SMTP_HOST_KEY),
        )

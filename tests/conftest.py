"""Shared fixtures for the marketplace notifications tests."""
import os
import uuid

import pytest
from sqlalchemy import create_engine
from sqlalchemy.orm import Session

os.environ.setdefault("SQLALCHEMY_CONNECTION_STRING", "sqlite://")

from marketplace_notifications.models.base import Base
from marketplace_notifications.models.application_configuration import ApplicationConfiguration  # noqa: F401
from marketplace_notifications.models.email_template import EmailTemplate
from marketplace_notifications.models.event import Event
from marketplace_notifications.models.plan_event_mapping import PlanEventMapping  # noqa: F401
from marketplace_notifications.models.subscription import Subscription  # noqa: F401
from marketplace_notifications.services.email_content_service import EmailContentService

SMTP_CONFIG = {
    "SMTPFromEmail": "noreply@contoso.com",
    "SMTPPassword": "s3cret",
    "SMTPSslEnabled": "True",
    "SMTPUserName": "smtp-user",
    "SMTPPort": "587",
    "SMTPHost": "smtp.contoso.com",
}


class FakeConfigRepository:
    """In-memory configuration store that records the keys it was asked for."""

    def __init__(self, values: dict[str, str]):
        self.values = dict(values)
        self.requested: list[str] = []

    def get_value_by_name(self, name: str) -> str | None:
        self.requested.append(name)
        return self.values.get(name)


class FakeTemplateRepository:
    def __init__(self, templates: dict[str, EmailTemplate], body: str = "<p>Body</p>"):
        self.templates = templates
        self.body = body
        self.status_lookups: list[str] = []
        self.body_lookups: list[tuple] = []

    def get_template_for_status(self, status: str) -> EmailTemplate | None:
        self.status_lookups.append(status)
        return self.templates.get(status)

    def get_email_body_for_subscription(self, subscription_id, process_status: str) -> str:
        self.body_lookups.append((subscription_id, process_status))
        return self.body


class FakeEventsRepository:
    def __init__(self, events: dict[str, Event]):
        self.events = events

    def get_by_name(self, events_name: str) -> Event:
        return self.events[events_name]


class FakePlanEventsMappingRepository:
    def __init__(self, mappings: dict[tuple, object]):
        self.mappings = mappings

    def get_plan_event(self, plan_id, events_id):
        return self.mappings.get((plan_id, events_id))


@pytest.fixture
def plan_id() -> uuid.UUID:
    return uuid.UUID("5d3f6c1e-8a0b-4f7e-9c2d-1b2a3c4d5e6f")


@pytest.fixture
def subscription_id() -> uuid.UUID:
    return uuid.UUID("a1b2c3d4-e5f6-4789-abcd-ef0123456789")


@pytest.fixture
def config_repo() -> FakeConfigRepository:
    return FakeConfigRepository({**SMTP_CONFIG, "SchedulerEmailTo": "ops@contoso.com"})


@pytest.fixture
def template_repo() -> FakeTemplateRepository:
    return FakeTemplateRepository({
        "Subscribed": EmailTemplate(status="Subscribed", subject="Subscription activated", cc="cc@contoso.com",
                                    bcc="audit@contoso.com", template_body="<p>Subscribed</p>"),
        "Failed": EmailTemplate(status="Failed", subject="Subscription failed", cc="support@contoso.com",
                                bcc="", template_body="<p>Failed</p>"),
        "Scheduler": EmailTemplate(
            status="Scheduler",
            subject="Scheduler report",
            template_body="Task ****SchedulerTaskName**** for ****SubscriptionName**** result: ****ResponseJson****",
        ),
    })


@pytest.fixture
def events_repo() -> FakeEventsRepository:
    return FakeEventsRepository({
        "Activate": Event(events_id=1, events_name="Activate"),
        "Unsubscribe": Event(events_id=2, events_name="Unsubscribe"),
    })


@pytest.fixture
def mapping_repo(plan_id) -> FakePlanEventsMappingRepository:
    return FakePlanEventsMappingRepository({
        (plan_id, 1): PlanEventMapping(
            plan_id=plan_id, events_id=1, success_state_emails="owner@contoso.com;sales@contoso.com",
            copy_to_customer=True,
        ),
    })


@pytest.fixture
def service(config_repo, template_repo, events_repo, mapping_repo) -> EmailContentService:
    return EmailContentService(
        application_config_repo=config_repo,
        email_template_repo=template_repo,
        events_repo=events_repo,
        plan_events_mapping_repo=mapping_repo,
    )


@pytest.fixture
def db_session():
    """In-memory SQLite session with every notification table created."""
    engine = create_engine("sqlite://")
    Base.metadata.create_all(engine)
    with Session(engine) as session:
        yield session
    engine.dispose()

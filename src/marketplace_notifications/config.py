"""Configuration for the marketplace notifications application."""
import os


def _get_required_env(var_name: str) -> str:
    """Gets a required environment variable or raises a ValueError."""
    value = os.getenv(var_name)
    if value is None:
        raise ValueError(f"Missing required environment variable: '{var_name}'")
    return value


# --- Core Application Settings (Required) ---
SQLALCHEMY_CONNECTION_STRING: str = _get_required_env("SQLALCHEMY_CONNECTION_STRING")

# Echo SQL statements
SQLALCHEMY_ECHO: bool = False
sqlalchemy_echo_setting: str | None = os.environ.get("SQLALCHEMY_ECHO")

if sqlalchemy_echo_setting and sqlalchemy_echo_setting.strip().lower() in ("true", "1", "yes", "on"):
    SQLALCHEMY_ECHO = True

# --- Application configuration store keys ---
SMTP_FROM_EMAIL_KEY = "SMTPFromEmail"
SMTP_PASSWORD_KEY = "SMTPPassword"
SMTP_SSL_ENABLED_KEY = "SMTPSslEnabled"
SMTP_USER_NAME_KEY = "SMTPUserName"
SMTP_PORT_KEY = "SMTPPort"
SMTP_HOST_KEY = "SMTPHost"
SCHEDULER_EMAIL_TO_KEY = "SchedulerEmailTo"

# --- Business Logic Constants ---
FAILURE_PROCESS_STATUS = "failure"
FAILED_TEMPLATE_STATUS = "Failed"

SUBSCRIPTION_NAME_TOKEN = "****SubscriptionName****"
SCHEDULER_TASK_NAME_TOKEN = "****SchedulerTaskName****"
RESPONSE_JSON_TOKEN = "****ResponseJson****"

RECIPIENT_SEPARATORS = (";", ",")

SUBSCRIPTION_ID_TOKEN = "****SubscriptionId****"
SUBSCRIPTION_STATUS_TOKEN = "****SubscriptionStatus****"
PLAN_ID_TOKEN = "****PlanId****"
QUANTITY_TOKEN = "****Quantity****"
CUSTOMER_NAME_TOKEN = "****CustomerName****"
CUSTOMER_EMAIL_TOKEN = "****CustomerEmail****"
PROCESS_STATUS_TOKEN = "****ProcessStatus****"

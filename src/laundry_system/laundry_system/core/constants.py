"""Constants and defaults.

Note: Keep business limits here to avoid magic numbers spread across code.
"""

DEFAULT_BRAND_NAME = "GoVlash"

CUSTOMER_EMAIL_SUFFIX = "@email.com"
EMPLOYEE_EMAIL_SUFFIX = "@govlash.com"

CUSTOMER_MIN_AGE = 12
EMPLOYEE_MIN_AGE = 17

PASSWORD_MIN_LENGTH = 6

SERVICE_MIN_DURATION_DAYS = 1
SERVICE_MAX_DURATION_DAYS = 30
SERVICE_NAME_MAX_LENGTH = 100
SERVICE_DESCRIPTION_MAX_LENGTH = 500

TRANSACTION_MIN_WEIGHT = 2.0
TRANSACTION_MAX_WEIGHT = 50.0
TRANSACTION_NOTES_MAX_LENGTH = 250

COMPLETION_MESSAGE_TEMPLATE = (
    "Good news! Your order #{transaction_id} is finished and ready for pickup. "
    "Thank you for choosing {brand}!"
)

SUCCESS = "Success"

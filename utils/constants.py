APP_NAME = "Money Tracker"
APP_WIDTH = 1100
APP_HEIGHT = 700

DATABASE_URL_ENV = "DATABASE_URL"
LOG_LEVEL_ENV = "LOG_LEVEL"

DATE_FORMAT = "%Y-%m-%d"
MONTH_FORMAT = "%Y-%m"
DISPLAY_DATE_FORMAT = "%d/%m/%Y"
DISPLAY_DATETIME_FORMAT = "%d-%m-%Y %H:%M"

DEFAULT_CURRENCY_ID = 1
DEFAULT_CURRENCY_SYMBOL = "USD"
NOT_FOUND_LABEL = "Not found"

DEFAULT_CURRENCIES = [
    {"name": "US Dollar",      "symbol": "$"},
    {"name": "Euro",           "symbol": "€"},
    {"name": "British Pound",  "symbol": "£"},
    {"name": "Japanese Yen",   "symbol": "¥"},
    {"name": "Swiss Franc",    "symbol": "CHF"},
]

# Suggestions only; account_type is free-form text
ACCOUNT_TYPES = ["checking", "savings", "cash", "credit_card"]

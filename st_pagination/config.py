"""Application configuration constants."""

import os

APP_NAME = "st_pagination"

# Key in the host state container (e.g. st.session_state) holding all configs.
STORE_KEY = "st_pagination.config"

DEFAULT_ALLOWED_ITEMS_PER_PAGE = [10, 20, 50, 100, 200]

DEFAULTS = {
    "allow_jump": True,
    "allow_set_per_page": True,
    "allowed_items_per_page": DEFAULT_ALLOWED_ITEMS_PER_PAGE,
}

JUMP_DIVISOR = 4

LOG_LEVEL = os.getenv("ST_PAGINATION_LOG_LEVEL", "INFO").upper()
LOG_JSON = os.getenv("ST_PAGINATION_LOG_JSON", "false").lower() in {"1", "true", "yes"}
LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s %(message)s"

DEMO_PAGINATION_ID = "demo_clients"
DEMO_ROW_COUNT = 437
DEMO_REGIONS = ["EMEA", "APAC", "AMER", "LATAM"]
SEARCH_COLUMNS = ["client_id", "name", "region"]
TABLE_COLUMNS = ["client_id", "name", "region", "revenue"]

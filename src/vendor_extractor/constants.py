"""Vendor record search column and filter constants."""

VENDOR_RECORD_TYPE = "vendor"

# Columns
INTERNAL_ID = "internalid"
ENTITY_ID = "entityid"
COMPANY_NAME = "companyname"
IS_INACTIVE = "isinactive"
SUBSIDIARY = "subsidiary"
CATEGORY = "category"

VENDOR_COLUMNS = (
    INTERNAL_ID,
    ENTITY_ID,
    COMPANY_NAME,
    IS_INACTIVE,
    SUBSIDIARY,
    CATEGORY,
)

# Only active vendors. Category text cannot be filtered in the host query
# language; use a saved search or filter client-side.
ACTIVE_ONLY_FILTER = (IS_INACTIVE, "is", "F")

# Hard cap on a single range retrieval
MAX_PAGE_SIZE = 1000

# Response messages
LIST_SUCCESS_MESSAGE = "Vendor list extracted successfully"
LIST_FAILURE_MESSAGE = "Failed to extract vendor list"
PAGE_SUCCESS_MESSAGE = "Vendor page extracted successfully"
PAGE_FAILURE_MESSAGE = "Failed to extract vendor page"

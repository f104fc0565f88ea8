"""Header names, request field names and API endpoints."""

from enum import Enum

ACCEPT = "Accept"
USER_AGENT = "User-Agent"
USER_AGENT_PYTHON = "Python Veryfi-Python/1.0.0"
APPLICATION_JSON = "application/json"
CONTENT_TYPE = "Content-Type"
CLIENT_ID = "Client-Id"
AUTHORIZATION = "Authorization"
X_VERYFI_REQUEST_TIMESTAMP = "X-Veryfi-Request-Timestamp"
X_VERYFI_REQUEST_SIGNATURE = "X-Veryfi-Request-Signature"
X_VERYFI_TRACE_ID = "x-veryfi-trace-id"

TIMESTAMP = "timestamp"
FILE_NAME = "file_name"
FILE_DATA = "file_data"
CATEGORIES = "categories"
AUTO_DELETE = "auto_delete"
BOOST_MODE = "boost_mode"
EXTERNAL_ID = "external_id"
FILE_URL = "file_url"
FILE_URLS = "file_urls"
MAX_PAGES_TO_PROCESS = "max_pages_to_process"
BLUEPRINT_NAME = "blueprint_name"

DEFAULT_CATEGORIES = [
    "Advertising & Marketing",
    "Automotive",
    "Bank Charges & Fees",
    "Legal & Professional Services",
    "Insurance",
    "Meals & Entertainment",
    "Office Supplies & Software",
    "Taxes & Licenses",
    "Travel",
    "Rent & Lease",
    "Repairs & Maintenance",
    "Payroll",
    "Utilities",
    "Job Supplies",
    "Grocery",
]


class Endpoint(str, Enum):
    """Resource paths, relative to the versioned API root."""

    DOCUMENTS = "/partner/documents/"
    ANY_DOCUMENTS = "/partner/any-documents/"
    BANK_STATEMENTS = "/partner/bank-statements/"
    BUSINESS_CARDS = "/partner/business-cards/"
    CHECKS = "/partner/checks/"
    W2S = "/partner/w2s/"
    W9S = "/partner/w9s/"
    W8BENE = "/partner/w-8ben-e/"
    CONTRACTS = "/partner/contracts/"
    CLASSIFY = "/partner/classify/"
    SPLIT = "/partner/documents-set/"

    def path(self, document_id: str | int | None = None) -> str:
        if document_id is None:
            return self.value
        return f"{self.value}{document_id}/"

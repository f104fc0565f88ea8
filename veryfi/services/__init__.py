from veryfi.services.any_documents import AnyDocumentServices
from veryfi.services.bank_statements import BankStatementServices
from veryfi.services.business_cards import BusinessCardServices
from veryfi.services.checks import CheckServices
from veryfi.services.classify import ClassifyServices
from veryfi.services.contracts import ContractServices
from veryfi.services.documents import DocumentServices
from veryfi.services.line_items import LineItemServices
from veryfi.services.split import SplitServices
from veryfi.services.tags import TagServices
from veryfi.services.w2s import W2Services
from veryfi.services.w8bene import W8BenEServices
from veryfi.services.w9s import W9Services

__all__ = [
    "AnyDocumentServices",
    "BankStatementServices",
    "BusinessCardServices",
    "CheckServices",
    "ClassifyServices",
    "ContractServices",
    "DocumentServices",
    "LineItemServices",
    "SplitServices",
    "TagServices",
    "W2Services",
    "W8BenEServices",
    "W9Services",
]

"""Numeric error codes reported in the ``ErrorInformation.Code`` field."""

from __future__ import annotations

from enum import IntEnum


class ApiErrorCode(IntEnum):
    # Anything the client does not know about yet.
    UNKNOWN = 0

    # Something went wrong on the remote end.
    SYSTEM_EXCEPTION = 1000003
    INVALID_RESPONSE_TYPE = 1000030
    INVALID_CONTENT_TYPE = 1000031

    # Field validation
    NOT_ALPHANUMERIC = 2000106
    NOT_NUMERIC = 2000108
    NOT_BOOLEAN = 2000134
    INVALID_CHARACTERS = 2000359
    INVALID_PARAMETERS = 2000588
    INVALID_FIELD_NAME = 2001399
    INCORRECT_DATA = 2001392
    COULD_NOT_READ_DOCUMENT = 2001740
    COULD_NOT_DESERIALIZE_JSON = 2002115
    A_VALID_IDENTIFIER_WAS_NOT_PROVIDED = 2000729

    # Authentication and licensing
    INVALID_CREDENTIALS = 2000310
    INVALID_CREDENTIALS_2 = 2000311
    NO_ACCESS_TO_SCOPE = 2000663
    NO_ACTIVE_LICENSE_FOR_SCOPE = 2001101
    NO_LICENSE = 2001103
    NOT_AUTHENTICATED = 2003275

    # Not found
    COULD_NOT_FIND_CUSTOMER = 2000204
    COULD_NOT_FIND_CUSTOMER_2 = 2000433
    COULD_NOT_FIND_ARTICLE = 2001302
    COULD_NOT_FIND_ARTICLE_2 = 2000428
    ACCOUNT_NOT_FOUND = 2001304
    COULD_NOT_BE_FOUND_IN_WAREHOUSE_MODULE = 2003277

    # Business rules
    CUSTOMER_NUMBER_HAS_ALREADY_BEEN_USED = 2000637
    SUPPLIER_INVOICE_DOES_NOT_BALANCE = 2000755
    ACCOUNT_IS_MISSING_FOR_PURCHASE_SE_REVERSED_TAX_LIABILITY = 2003095
    TAX_ROWS_FOR_VAT_TYPE_REVERSE_MUST_BE_MARKED_WITH_CODE = 2003115
    ONLY_DELIVERED_ORDERS_CAN_BE_MARKED_COMPLETED = 2003124
    CANNOT_CHANGE_COMPLETED_DOCUMENT = 2003125
    DELIVERY_DATE_CANNOT_BE_LATER_THAN_TODAY = 2003126
    AN_ERROR_OCCURRED_IN_WAREHOUSE_MODULE = 2003127
    MIGRATION_ALREADY_STARTED_OR_COMPLETED = 2003241
    DOCUMENT_IS_DELETED_IN_WAREHOUSE_MODULE = 2003399

    @classmethod
    def _missing_(cls, value: object) -> "ApiErrorCode":
        return cls.UNKNOWN

    @classmethod
    def parse(cls, value: object) -> "ApiErrorCode":
        """Map any wire value to a code, falling back to ``UNKNOWN``."""
        try:
            return cls(int(value))  # type: ignore[arg-type]
        except (TypeError, ValueError):
            return cls.UNKNOWN


__all__ = ["ApiErrorCode"]

"""MAPI property tags written into Outlook .msg documents.

Each module-level ``PR_*`` constant binds a symbolic property name to a
:class:`PropertyTag` value.  Fields that exist in both string encodings have
two entries with the same id: ``_W`` for UTF-16 (``PT_UNICODE``) and ``_A``
for the 8-bit codepage variant (``PT_STRING8``).

The constants are created once at import time and never mutated; use
:mod:`msgkit_writer.registry` to resolve them by name.
"""

from __future__ import annotations

from dataclasses import dataclass

from msgkit_writer.errors import InvalidArgumentException
from msgkit_writer.property_types import PropertyType


@dataclass(frozen=True)
class PropertyTag:
    """A ``(id, type)`` pair naming one property of a message document."""

    id: int
    type: PropertyType

    def __post_init__(self) -> None:
        if not 0 <= self.id <= 0xFFFF:
            raise InvalidArgumentException(
                f"Property id 0x{self.id:X} does not fit in 16 bits", stage="registry"
            )
        if not isinstance(self.type, PropertyType):
            object.__setattr__(self, "type", PropertyType.from_code(self.type))

    @property
    def value(self) -> int:
        """The 32-bit combined tag, id in the high word."""
        return (self.id << 16) | int(self.type)

    @classmethod
    def from_value(cls, value: int) -> PropertyTag:
        return cls((value >> 16) & 0xFFFF, PropertyType.from_code(value & 0xFFFF))

    @property
    def name(self) -> str:
        """Storage leaf name, e.g. ``__substg1.0_0037001F``."""
        from msgkit_writer.naming import derive_name

        return derive_name(self)

    def same_field(self, other: PropertyTag) -> bool:
        """True when both tags name the same field, whatever their types."""
        return self.id == other.id

    def __repr__(self) -> str:
        return f"PropertyTag(0x{self.id:04X}, {self.type.name})"

# Message envelope properties
PR_ACKNOWLEDGEMENT_MODE = PropertyTag(0x0001, PropertyType.PT_LONG)
PR_ALTERNATE_RECIPIENT_ALLOWED = PropertyTag(0x0002, PropertyType.PT_BOOLEAN)
PR_AUTHORIZING_USERS = PropertyTag(0x0003, PropertyType.PT_BINARY)
PR_AUTO_FORWARD_COMMENT_W = PropertyTag(0x0004, PropertyType.PT_UNICODE)
PR_AUTO_FORWARD_COMMENT_A = PropertyTag(0x0004, PropertyType.PT_STRING8)
PR_AUTO_FORWARDED = PropertyTag(0x0005, PropertyType.PT_BOOLEAN)
PR_CONTENT_CONFIDENTIALITY_ALGORITHM_ID = PropertyTag(0x0006, PropertyType.PT_BINARY)
PR_CONTENT_CORRELATOR = PropertyTag(0x0007, PropertyType.PT_BINARY)
PR_CONTENT_IDENTIFIER_W = PropertyTag(0x0008, PropertyType.PT_UNICODE)
PR_CONTENT_IDENTIFIER_A = PropertyTag(0x0008, PropertyType.PT_STRING8)
PR_CONTENT_LENGTH = PropertyTag(0x0009, PropertyType.PT_LONG)
PR_CONTENT_RETURN_REQUESTED = PropertyTag(0x000A, PropertyType.PT_BOOLEAN)
PR_CONVERSATION_KEY = PropertyTag(0x000B, PropertyType.PT_BINARY)
PR_CONVERSION_EITS = PropertyTag(0x000C, PropertyType.PT_BINARY)
PR_CONVERSION_WITH_LOSS_PROHIBITED = PropertyTag(0x000D, PropertyType.PT_BOOLEAN)
PR_CONVERTED_EITS = PropertyTag(0x000E, PropertyType.PT_BINARY)
PR_DEFERRED_DELIVERY_TIME = PropertyTag(0x000F, PropertyType.PT_SYSTIME)
PR_DELIVER_TIME = PropertyTag(0x0010, PropertyType.PT_SYSTIME)
PR_DISCARD_REASON = PropertyTag(0x0011, PropertyType.PT_LONG)
PR_DISCLOSURE_OF_RECIPIENTS = PropertyTag(0x0012, PropertyType.PT_BOOLEAN)
PR_DL_EXPANSION_HISTORY = PropertyTag(0x0013, PropertyType.PT_BINARY)
PR_DL_EXPANSION_PROHIBITED = PropertyTag(0x0014, PropertyType.PT_BOOLEAN)
PR_EXPIRY_TIME = PropertyTag(0x0015, PropertyType.PT_SYSTIME)
PR_IMPLICIT_CONVERSION_PROHIBITED = PropertyTag(0x0016, PropertyType.PT_BOOLEAN)
PR_IMPORTANCE = PropertyTag(0x0017, PropertyType.PT_LONG)
PR_IPM_ID = PropertyTag(0x0018, PropertyType.PT_BINARY)
PR_LATEST_DELIVERY_TIME = PropertyTag(0x0019, PropertyType.PT_SYSTIME)
PR_MESSAGE_CLASS_W = PropertyTag(0x001A, PropertyType.PT_UNICODE)
PR_MESSAGE_CLASS_A = PropertyTag(0x001A, PropertyType.PT_STRING8)
PR_MESSAGE_DELIVERY_ID = PropertyTag(0x001B, PropertyType.PT_BINARY)
PR_MESSAGE_SECURITY_LABEL = PropertyTag(0x001E, PropertyType.PT_BINARY)
PR_OBSOLETED_IPMS = PropertyTag(0x001F, PropertyType.PT_BINARY)
PR_ORIGINALLY_INTENDED_RECIPIENT_NAME = PropertyTag(0x0020, PropertyType.PT_BINARY)
PR_ORIGINAL_EITS = PropertyTag(0x0021, PropertyType.PT_BINARY)
PR_ORIGINATOR_CERTIFICATE = PropertyTag(0x0022, PropertyType.PT_BINARY)
PR_ORIGINATOR_DELIVERY_REPORT_REQUESTED = PropertyTag(0x0023, PropertyType.PT_BOOLEAN)
PR_ORIGINATOR_RETURN_ADDRESS = PropertyTag(0x0024, PropertyType.PT_BINARY)
PR_PARENT_KEY = PropertyTag(0x0025, PropertyType.PT_BINARY)
PR_PRIORITY = PropertyTag(0x0026, PropertyType.PT_LONG)
PR_ORIGIN_CHECK = PropertyTag(0x0027, PropertyType.PT_BINARY)
PR_PROOF_OF_SUBMISSION_REQUESTED = PropertyTag(0x0028, PropertyType.PT_BOOLEAN)
PR_READ_RECEIPT_REQUESTED = PropertyTag(0x0029, PropertyType.PT_BOOLEAN)
PR_RECEIPT_TIME = PropertyTag(0x002A, PropertyType.PT_SYSTIME)
PR_RECIPIENT_REASSIGNMENT_PROHIBITED = PropertyTag(0x002B, PropertyType.PT_BOOLEAN)
PR_REDIRECTION_HISTORY = PropertyTag(0x002C, PropertyType.PT_BINARY)
PR_RELATED_IPMS = PropertyTag(0x002D, PropertyType.PT_BINARY)
PR_LANGUAGES_W = PropertyTag(0x002F, PropertyType.PT_UNICODE)
PR_LANGUAGES_A = PropertyTag(0x002F, PropertyType.PT_STRING8)
PR_REPLY_TIME = PropertyTag(0x0030, PropertyType.PT_SYSTIME)
PR_REPORT_TAG = PropertyTag(0x0031, PropertyType.PT_BINARY)
PR_REPORT_TIME = PropertyTag(0x0032, PropertyType.PT_SYSTIME)
PR_RETURNED_IPM = PropertyTag(0x0033, PropertyType.PT_BOOLEAN)
PR_SECURITY = PropertyTag(0x0034, PropertyType.PT_LONG)
PR_INCOMPLETE_COPY = PropertyTag(0x0035, PropertyType.PT_BOOLEAN)
PR_SENSITIVITY = PropertyTag(0x0036, PropertyType.PT_LONG)
PR_SUBJECT_W = PropertyTag(0x0037, PropertyType.PT_UNICODE)
PR_SUBJECT_A = PropertyTag(0x0037, PropertyType.PT_STRING8)
PR_SUBJECT_IPM = PropertyTag(0x0038, PropertyType.PT_BINARY)
PR_CLIENT_SUBMIT_TIME = PropertyTag(0x0039, PropertyType.PT_SYSTIME)
PR_REPORT_NAME_W = PropertyTag(0x003A, PropertyType.PT_UNICODE)
PR_REPORT_NAME_A = PropertyTag(0x003A, PropertyType.PT_STRING8)
PR_SENT_REPRESENTING_SEARCH_KEY = PropertyTag(0x003B, PropertyType.PT_BINARY)
PR_X400_CONTENT_TYPE = PropertyTag(0x003C, PropertyType.PT_BINARY)
PR_SUBJECT_PREFIX_W = PropertyTag(0x003D, PropertyType.PT_UNICODE)
PR_SUBJECT_PREFIX_A = PropertyTag(0x003D, PropertyType.PT_STRING8)
PR_NON_RECEIPT_REASON = PropertyTag(0x003E, PropertyType.PT_LONG)
PR_RECEIVED_BY_ENTRYID = PropertyTag(0x003F, PropertyType.PT_BINARY)
PR_RECEIVED_BY_NAME_W = PropertyTag(0x0040, PropertyType.PT_UNICODE)
PR_RECEIVED_BY_NAME_A = PropertyTag(0x0040, PropertyType.PT_STRING8)
PR_SENT_REPRESENTING_ENTRYID = PropertyTag(0x0041, PropertyType.PT_BINARY)
PR_SENT_REPRESENTING_NAME_W = PropertyTag(0x0042, PropertyType.PT_UNICODE)
PR_SENT_REPRESENTING_NAME_A = PropertyTag(0x0042, PropertyType.PT_STRING8)
PR_RCVD_REPRESENTING_ENTRYID = PropertyTag(0x0043, PropertyType.PT_BINARY)
PR_RCVD_REPRESENTING_NAME_W = PropertyTag(0x0044, PropertyType.PT_UNICODE)
PR_RCVD_REPRESENTING_NAME_A = PropertyTag(0x0044, PropertyType.PT_STRING8)
PR_REPORT_ENTRYID = PropertyTag(0x0045, PropertyType.PT_BINARY)
PR_READ_RECEIPT_ENTRYID = PropertyTag(0x0046, PropertyType.PT_BINARY)
PR_MESSAGE_SUBMISSION_ID = PropertyTag(0x0047, PropertyType.PT_BINARY)
PR_PROVIDER_SUBMIT_TIME = PropertyTag(0x0048, PropertyType.PT_SYSTIME)
PR_ORIGINAL_SUBJECT_W = PropertyTag(0x0049, PropertyType.PT_UNICODE)
PR_ORIGINAL_SUBJECT_A = PropertyTag(0x0049, PropertyType.PT_STRING8)
PR_DISC_VAL = PropertyTag(0x004A, PropertyType.PT_BOOLEAN)
PR_ORIG_MESSAGE_CLASS_W = PropertyTag(0x004B, PropertyType.PT_UNICODE)
PR_ORIG_MESSAGE_CLASS_A = PropertyTag(0x004B, PropertyType.PT_STRING8)
PR_ORIGINAL_AUTHOR_ENTRYID = PropertyTag(0x004C, PropertyType.PT_BINARY)
PR_ORIGINAL_AUTHOR_NAME_W = PropertyTag(0x004D, PropertyType.PT_UNICODE)
PR_ORIGINAL_AUTHOR_NAME_A = PropertyTag(0x004D, PropertyType.PT_STRING8)
PR_ORIGINAL_SUBMIT_TIME = PropertyTag(0x004E, PropertyType.PT_SYSTIME)
PR_REPLY_RECIPIENT_ENTRIES = PropertyTag(0x004F, PropertyType.PT_BINARY)
PR_REPLY_RECIPIENT_NAMES_W = PropertyTag(0x0050, PropertyType.PT_UNICODE)
PR_REPLY_RECIPIENT_NAMES_A = PropertyTag(0x0050, PropertyType.PT_STRING8)
PR_RECEIVED_BY_SEARCH_KEY = PropertyTag(0x0051, PropertyType.PT_BINARY)
PR_RCVD_REPRESENTING_SEARCH_KEY = PropertyTag(0x0052, PropertyType.PT_BINARY)
PR_READ_RECEIPT_SEARCH_KEY = PropertyTag(0x0053, PropertyType.PT_BINARY)
PR_REPORT_SEARCH_KEY = PropertyTag(0x0054, PropertyType.PT_BINARY)
PR_ORIGINAL_DELIVERY_TIME = PropertyTag(0x0055, PropertyType.PT_SYSTIME)
PR_ORIGINAL_AUTHOR_SEARCH_KEY = PropertyTag(0x0056, PropertyType.PT_BINARY)
PR_MESSAGE_TO_ME = PropertyTag(0x0057, PropertyType.PT_BOOLEAN)
PR_MESSAGE_CC_ME = PropertyTag(0x0058, PropertyType.PT_BOOLEAN)
PR_MESSAGE_RECIP_ME = PropertyTag(0x0059, PropertyType.PT_BOOLEAN)
PR_ORIGINAL_SENDER_NAME_W = PropertyTag(0x005A, PropertyType.PT_UNICODE)
PR_ORIGINAL_SENDER_NAME_A = PropertyTag(0x005A, PropertyType.PT_STRING8)
PR_ORIGINAL_SENDER_ENTRYID = PropertyTag(0x005B, PropertyType.PT_BINARY)
PR_ORIGINAL_SENDER_SEARCH_KEY = PropertyTag(0x005C, PropertyType.PT_BINARY)
PR_ORIGINAL_SENT_REPRESENTING_NAME_W = PropertyTag(0x005D, PropertyType.PT_UNICODE)
PR_ORIGINAL_SENT_REPRESENTING_NAME_A = PropertyTag(0x005D, PropertyType.PT_STRING8)
PR_ORIGINAL_SENT_REPRESENTING_ENTRYID = PropertyTag(0x005E, PropertyType.PT_BINARY)
PR_ORIGINAL_SENT_REPRESENTING_SEARCH_KEY = PropertyTag(0x005F, PropertyType.PT_BINARY)
PR_START_DATE = PropertyTag(0x0060, PropertyType.PT_SYSTIME)
PR_END_DATE = PropertyTag(0x0061, PropertyType.PT_SYSTIME)
PR_OWNER_APPT_ID = PropertyTag(0x0062, PropertyType.PT_LONG)
PR_RESPONSE_REQUESTED = PropertyTag(0x0063, PropertyType.PT_BOOLEAN)
PR_SENT_REPRESENTING_ADDRTYPE_W = PropertyTag(0x0064, PropertyType.PT_UNICODE)
PR_SENT_REPRESENTING_ADDRTYPE_A = PropertyTag(0x0064, PropertyType.PT_STRING8)
PR_SENT_REPRESENTING_EMAIL_ADDRESS_W = PropertyTag(0x0065, PropertyType.PT_UNICODE)
PR_SENT_REPRESENTING_EMAIL_ADDRESS_A = PropertyTag(0x0065, PropertyType.PT_STRING8)
PR_ORIGINAL_SENDER_ADDRTYPE_W = PropertyTag(0x0066, PropertyType.PT_UNICODE)
PR_ORIGINAL_SENDER_ADDRTYPE_A = PropertyTag(0x0066, PropertyType.PT_STRING8)
PR_ORIGINAL_SENDER_EMAIL_ADDRESS_W = PropertyTag(0x0067, PropertyType.PT_UNICODE)
PR_ORIGINAL_SENDER_EMAIL_ADDRESS_A = PropertyTag(0x0067, PropertyType.PT_STRING8)
PR_ORIGINAL_SENT_REPRESENTING_ADDRTYPE_W = PropertyTag(0x0068, PropertyType.PT_UNICODE)
PR_ORIGINAL_SENT_REPRESENTING_ADDRTYPE_A = PropertyTag(0x0068, PropertyType.PT_STRING8)
PR_ORIGINAL_SENT_REPRESENTING_EMAIL_ADDRESS_W = PropertyTag(0x0069, PropertyType.PT_UNICODE)
PR_ORIGINAL_SENT_REPRESENTING_EMAIL_ADDRESS_A = PropertyTag(0x0069, PropertyType.PT_STRING8)
PR_CONVERSATION_TOPIC_W = PropertyTag(0x0070, PropertyType.PT_UNICODE)
PR_CONVERSATION_TOPIC_A = PropertyTag(0x0070, PropertyType.PT_STRING8)
PR_CONVERSATION_INDEX = PropertyTag(0x0071, PropertyType.PT_BINARY)
PR_ORIGINAL_DISPLAY_BCC_W = PropertyTag(0x0072, PropertyType.PT_UNICODE)
PR_ORIGINAL_DISPLAY_BCC_A = PropertyTag(0x0072, PropertyType.PT_STRING8)
PR_ORIGINAL_DISPLAY_CC_W = PropertyTag(0x0073, PropertyType.PT_UNICODE)
PR_ORIGINAL_DISPLAY_CC_A = PropertyTag(0x0073, PropertyType.PT_STRING8)
PR_ORIGINAL_DISPLAY_TO_W = PropertyTag(0x0074, PropertyType.PT_UNICODE)
PR_ORIGINAL_DISPLAY_TO_A = PropertyTag(0x0074, PropertyType.PT_STRING8)
PR_RECEIVED_BY_ADDRTYPE_W = PropertyTag(0x0075, PropertyType.PT_UNICODE)
PR_RECEIVED_BY_ADDRTYPE_A = PropertyTag(0x0075, PropertyType.PT_STRING8)
PR_RECEIVED_BY_EMAIL_ADDRESS_W = PropertyTag(0x0076, PropertyType.PT_UNICODE)
PR_RECEIVED_BY_EMAIL_ADDRESS_A = PropertyTag(0x0076, PropertyType.PT_STRING8)
PR_RCVD_REPRESENTING_ADDRTYPE_W = PropertyTag(0x0077, PropertyType.PT_UNICODE)
PR_RCVD_REPRESENTING_ADDRTYPE_A = PropertyTag(0x0077, PropertyType.PT_STRING8)
PR_RCVD_REPRESENTING_EMAIL_ADDRESS_W = PropertyTag(0x0078, PropertyType.PT_UNICODE)
PR_RCVD_REPRESENTING_EMAIL_ADDRESS_A = PropertyTag(0x0078, PropertyType.PT_STRING8)
PR_ORIGINAL_AUTHOR_ADDRTYPE_W = PropertyTag(0x0079, PropertyType.PT_UNICODE)
PR_ORIGINAL_AUTHOR_ADDRTYPE_A = PropertyTag(0x0079, PropertyType.PT_STRING8)
PR_ORIGINAL_AUTHOR_EMAIL_ADDRESS_W = PropertyTag(0x007A, PropertyType.PT_UNICODE)
PR_ORIGINAL_AUTHOR_EMAIL_ADDRESS_A = PropertyTag(0x007A, PropertyType.PT_STRING8)
PR_ORIGINALLY_INTENDED_RECIP_ADDRTYPE_W = PropertyTag(0x007B, PropertyType.PT_UNICODE)
PR_ORIGINALLY_INTENDED_RECIP_ADDRTYPE_A = PropertyTag(0x007B, PropertyType.PT_STRING8)
PR_ORIGINALLY_INTENDED_RECIP_EMAIL_ADDRESS_W = PropertyTag(0x007C, PropertyType.PT_UNICODE)
PR_ORIGINALLY_INTENDED_RECIP_EMAIL_ADDRESS_A = PropertyTag(0x007C, PropertyType.PT_STRING8)
PR_TRANSPORT_MESSAGE_HEADERS_W = PropertyTag(0x007D, PropertyType.PT_UNICODE)
PR_TRANSPORT_MESSAGE_HEADERS_A = PropertyTag(0x007D, PropertyType.PT_STRING8)

# Recipient properties
PR_CONTENT_INTEGRITY_CHECK = PropertyTag(0x0C00, PropertyType.PT_BINARY)
PR_EXPLICIT_CONVERSION = PropertyTag(0x0C01, PropertyType.PT_LONG)
PR_IPM_RETURN_REQUESTED = PropertyTag(0x0C02, PropertyType.PT_BOOLEAN)
PR_MESSAGE_TOKEN = PropertyTag(0x0C03, PropertyType.PT_BINARY)
PR_NDR_REASON_CODE = PropertyTag(0x0C04, PropertyType.PT_LONG)
PR_NDR_DIAG_CODE = PropertyTag(0x0C05, PropertyType.PT_LONG)
PR_NON_RECEIPT_NOTIFICATION_REQUESTED = PropertyTag(0x0C06, PropertyType.PT_BOOLEAN)
PR_ORIGINATOR_NON_DELIVERY_REPORT_REQUESTED = PropertyTag(0x0C08, PropertyType.PT_BOOLEAN)
PR_ORIGINATOR_REQUESTED_ALTERNATE_RECIPIENT = PropertyTag(0x0C09, PropertyType.PT_BINARY)
PR_PHYSICAL_DELIVERY_BUREAU_FAX_DELIVERY = PropertyTag(0x0C0A, PropertyType.PT_BOOLEAN)
PR_PHYSICAL_DELIVERY_MODE = PropertyTag(0x0C0B, PropertyType.PT_LONG)
PR_PHYSICAL_DELIVERY_REPORT_REQUEST = PropertyTag(0x0C0C, PropertyType.PT_LONG)
PR_PHYSICAL_FORWARDING_ADDRESS = PropertyTag(0x0C0D, PropertyType.PT_BINARY)
PR_PHYSICAL_FORWARDING_ADDRESS_REQUESTED = PropertyTag(0x0C0E, PropertyType.PT_BOOLEAN)
PR_PHYSICAL_FORWARDING_PROHIBITED = PropertyTag(0x0C0F, PropertyType.PT_BOOLEAN)
PR_PHYSICAL_RENDITION_ATTRIBUTES = PropertyTag(0x0C10, PropertyType.PT_BINARY)
PR_PROOF_OF_DELIVERY = PropertyTag(0x0C11, PropertyType.PT_BINARY)
PR_PROOF_OF_DELIVERY_REQUESTED = PropertyTag(0x0C12, PropertyType.PT_BOOLEAN)
PR_RECIPIENT_CERTIFICATE = PropertyTag(0x0C13, PropertyType.PT_BINARY)
PR_RECIPIENT_NUMBER_FOR_ADVICE_W = PropertyTag(0x0C14, PropertyType.PT_UNICODE)
PR_RECIPIENT_NUMBER_FOR_ADVICE_A = PropertyTag(0x0C14, PropertyType.PT_STRING8)
PR_RECIPIENT_TYPE = PropertyTag(0x0C15, PropertyType.PT_LONG)
PR_REGISTERED_MAIL_TYPE = PropertyTag(0x0C16, PropertyType.PT_LONG)
PR_REPLY_REQUESTED = PropertyTag(0x0C17, PropertyType.PT_BOOLEAN)
PR_REQUESTED_DELIVERY_METHOD = PropertyTag(0x0C18, PropertyType.PT_LONG)
PR_SENDER_ENTRYID = PropertyTag(0x0C19, PropertyType.PT_BINARY)
PR_SENDER_NAME_W = PropertyTag(0x0C1A, PropertyType.PT_UNICODE)
PR_SENDER_NAME_A = PropertyTag(0x0C1A, PropertyType.PT_STRING8)
PR_SUPPLEMENTARY_INFO_W = PropertyTag(0x0C1B, PropertyType.PT_UNICODE)
PR_SUPPLEMENTARY_INFO_A = PropertyTag(0x0C1B, PropertyType.PT_STRING8)
PR_TYPE_OF_MTS_USER = PropertyTag(0x0C1C, PropertyType.PT_LONG)
PR_SENDER_SEARCH_KEY = PropertyTag(0x0C1D, PropertyType.PT_BINARY)
PR_SENDER_ADDRTYPE_W = PropertyTag(0x0C1E, PropertyType.PT_UNICODE)
PR_SENDER_ADDRTYPE_A = PropertyTag(0x0C1E, PropertyType.PT_STRING8)
PR_SENDER_EMAIL_ADDRESS_W = PropertyTag(0x0C1F, PropertyType.PT_UNICODE)
PR_SENDER_EMAIL_ADDRESS_A = PropertyTag(0x0C1F, PropertyType.PT_STRING8)

# Non-transmittable message properties
PR_CURRENT_VERSION = PropertyTag(0x0E00, PropertyType.PT_I8)
PR_DELETE_AFTER_SUBMIT = PropertyTag(0x0E01, PropertyType.PT_BOOLEAN)
PR_DISPLAY_BCC_W = PropertyTag(0x0E02, PropertyType.PT_UNICODE)
PR_DISPLAY_BCC_A = PropertyTag(0x0E02, PropertyType.PT_STRING8)
PR_DISPLAY_CC_W = PropertyTag(0x0E03, PropertyType.PT_UNICODE)
PR_DISPLAY_CC_A = PropertyTag(0x0E03, PropertyType.PT_STRING8)
PR_DISPLAY_TO_W = PropertyTag(0x0E04, PropertyType.PT_UNICODE)
PR_DISPLAY_TO_A = PropertyTag(0x0E04, PropertyType.PT_STRING8)
PR_PARENT_DISPLAY_W = PropertyTag(0x0E05, PropertyType.PT_UNICODE)
PR_PARENT_DISPLAY_A = PropertyTag(0x0E05, PropertyType.PT_STRING8)
PR_MESSAGE_DELIVERY_TIME = PropertyTag(0x0E06, PropertyType.PT_SYSTIME)
PR_MESSAGE_FLAGS = PropertyTag(0x0E07, PropertyType.PT_LONG)
PR_MESSAGE_SIZE = PropertyTag(0x0E08, PropertyType.PT_LONG)
PR_PARENT_ENTRYID = PropertyTag(0x0E09, PropertyType.PT_BINARY)
PR_SENTMAIL_ENTRYID = PropertyTag(0x0E0A, PropertyType.PT_BINARY)
PR_CORRELATE = PropertyTag(0x0E0C, PropertyType.PT_BOOLEAN)
PR_CORRELATE_MTSID = PropertyTag(0x0E0D, PropertyType.PT_BINARY)
PR_DISCRETE_VALUES = PropertyTag(0x0E0E, PropertyType.PT_BOOLEAN)
PR_RESPONSIBILITY = PropertyTag(0x0E0F, PropertyType.PT_BOOLEAN)
PR_SPOOLER_STATUS = PropertyTag(0x0E10, PropertyType.PT_LONG)
PR_TRANSPORT_STATUS = PropertyTag(0x0E11, PropertyType.PT_LONG)
PR_MESSAGE_RECIPIENTS = PropertyTag(0x0E12, PropertyType.PT_OBJECT)
PR_MESSAGE_ATTACHMENTS = PropertyTag(0x0E13, PropertyType.PT_OBJECT)
PR_SUBMIT_FLAGS = PropertyTag(0x0E14, PropertyType.PT_LONG)
PR_RECIPIENT_STATUS = PropertyTag(0x0E15, PropertyType.PT_LONG)
PR_TRANSPORT_KEY = PropertyTag(0x0E16, PropertyType.PT_LONG)
PR_MSG_STATUS = PropertyTag(0x0E17, PropertyType.PT_LONG)
PR_MESSAGE_DOWNLOAD_TIME = PropertyTag(0x0E18, PropertyType.PT_LONG)
PR_CREATION_VERSION = PropertyTag(0x0E19, PropertyType.PT_I8)
PR_MODIFY_VERSION = PropertyTag(0x0E1A, PropertyType.PT_I8)
PR_HASATTACH = PropertyTag(0x0E1B, PropertyType.PT_BOOLEAN)
PR_BODY_CRC = PropertyTag(0x0E1C, PropertyType.PT_LONG)
PR_NORMALIZED_SUBJECT_W = PropertyTag(0x0E1D, PropertyType.PT_UNICODE)
PR_NORMALIZED_SUBJECT_A = PropertyTag(0x0E1D, PropertyType.PT_STRING8)
PR_RTF_IN_SYNC = PropertyTag(0x0E1F, PropertyType.PT_BOOLEAN)
PR_ATTACH_SIZE = PropertyTag(0x0E20, PropertyType.PT_LONG)
PR_ATTACH_NUM = PropertyTag(0x0E21, PropertyType.PT_LONG)
PR_PREPROCESS = PropertyTag(0x0E22, PropertyType.PT_BOOLEAN)
PR_ACCESS = PropertyTag(0x0FF4, PropertyType.PT_LONG)
PR_ROW_TYPE = PropertyTag(0x0FF5, PropertyType.PT_LONG)
PR_INSTANCE_KEY = PropertyTag(0x0FF6, PropertyType.PT_BINARY)
PR_ACCESS_LEVEL = PropertyTag(0x0FF7, PropertyType.PT_LONG)
PR_MAPPING_SIGNATURE = PropertyTag(0x0FF8, PropertyType.PT_BINARY)
PR_RECORD_KEY = PropertyTag(0x0FF9, PropertyType.PT_BINARY)
PR_STORE_RECORD_KEY = PropertyTag(0x0FFA, PropertyType.PT_BINARY)
PR_STORE_ENTRYID = PropertyTag(0x0FFB, PropertyType.PT_BINARY)
PR_MINI_ICON = PropertyTag(0x0FFC, PropertyType.PT_BINARY)
PR_ICON = PropertyTag(0x0FFD, PropertyType.PT_BINARY)
PR_OBJECT_TYPE = PropertyTag(0x0FFE, PropertyType.PT_LONG)
PR_ENTRYID = PropertyTag(0x0FFF, PropertyType.PT_BINARY)

# Message content properties
PR_BODY_W = PropertyTag(0x1000, PropertyType.PT_UNICODE)
PR_BODY_A = PropertyTag(0x1000, PropertyType.PT_STRING8)
PR_REPORT_TEXT_W = PropertyTag(0x1001, PropertyType.PT_UNICODE)
PR_REPORT_TEXT_A = PropertyTag(0x1001, PropertyType.PT_STRING8)
PR_ORIGINATOR_AND_DL_EXPANSION_HISTORY = PropertyTag(0x1002, PropertyType.PT_BINARY)
PR_REPORTING_DL_NAME = PropertyTag(0x1003, PropertyType.PT_BINARY)
PR_REPORTING_MTA_CERTIFICATE = PropertyTag(0x1004, PropertyType.PT_BINARY)
PR_RTF_SYNC_BODY_CRC = PropertyTag(0x1006, PropertyType.PT_LONG)
PR_RTF_SYNC_BODY_COUNT = PropertyTag(0x1007, PropertyType.PT_LONG)
PR_RTF_SYNC_BODY_TAG_W = PropertyTag(0x1008, PropertyType.PT_UNICODE)
PR_RTF_SYNC_BODY_TAG_A = PropertyTag(0x1008, PropertyType.PT_STRING8)
PR_RTF_COMPRESSED = PropertyTag(0x1009, PropertyType.PT_BINARY)
PR_RTF_SYNC_PREFIX_COUNT = PropertyTag(0x1010, PropertyType.PT_LONG)
PR_RTF_SYNC_TRAILING_COUNT = PropertyTag(0x1011, PropertyType.PT_LONG)
PR_ORIGINALLY_INTENDED_RECIP_ENTRYID = PropertyTag(0x1012, PropertyType.PT_BINARY)

# Common properties
PR_ROWID = PropertyTag(0x3000, PropertyType.PT_LONG)
PR_DISPLAY_NAME_W = PropertyTag(0x3001, PropertyType.PT_UNICODE)
PR_DISPLAY_NAME_A = PropertyTag(0x3001, PropertyType.PT_STRING8)
PR_ADDRTYPE_W = PropertyTag(0x3002, PropertyType.PT_UNICODE)
PR_ADDRTYPE_A = PropertyTag(0x3002, PropertyType.PT_STRING8)
PR_EMAIL_ADDRESS_W = PropertyTag(0x3003, PropertyType.PT_UNICODE)
PR_EMAIL_ADDRESS_A = PropertyTag(0x3003, PropertyType.PT_STRING8)
PR_COMMENT_W = PropertyTag(0x3004, PropertyType.PT_UNICODE)
PR_COMMENT_A = PropertyTag(0x3004, PropertyType.PT_STRING8)
PR_DEPTH = PropertyTag(0x3005, PropertyType.PT_LONG)
PR_PROVIDER_DISPLAY_W = PropertyTag(0x3006, PropertyType.PT_UNICODE)
PR_PROVIDER_DISPLAY_A = PropertyTag(0x3006, PropertyType.PT_STRING8)
PR_CREATION_TIME = PropertyTag(0x3007, PropertyType.PT_SYSTIME)
PR_LAST_MODIFICATION_TIME = PropertyTag(0x3008, PropertyType.PT_SYSTIME)
PR_RESOURCE_FLAGS = PropertyTag(0x3009, PropertyType.PT_LONG)
PR_PROVIDER_DLL_NAME_W = PropertyTag(0x300A, PropertyType.PT_UNICODE)
PR_PROVIDER_DLL_NAME_A = PropertyTag(0x300A, PropertyType.PT_STRING8)
PR_SEARCH_KEY = PropertyTag(0x300B, PropertyType.PT_BINARY)
PR_PROVIDER_UID = PropertyTag(0x300C, PropertyType.PT_BINARY)
PR_PROVIDER_ORDINAL = PropertyTag(0x300D, PropertyType.PT_LONG)

# Form properties
PR_FORM_VERSION_W = PropertyTag(0x3301, PropertyType.PT_UNICODE)
PR_FORM_VERSION_A = PropertyTag(0x3301, PropertyType.PT_STRING8)
PR_FORM_CLSID = PropertyTag(0x3302, PropertyType.PT_CLSID)
PR_FORM_CONTACT_NAME_W = PropertyTag(0x3303, PropertyType.PT_UNICODE)
PR_FORM_CONTACT_NAME_A = PropertyTag(0x3303, PropertyType.PT_STRING8)
PR_FORM_CATEGORY_W = PropertyTag(0x3304, PropertyType.PT_UNICODE)
PR_FORM_CATEGORY_A = PropertyTag(0x3304, PropertyType.PT_STRING8)
PR_FORM_CATEGORY_SUB_W = PropertyTag(0x3305, PropertyType.PT_UNICODE)
PR_FORM_CATEGORY_SUB_A = PropertyTag(0x3305, PropertyType.PT_STRING8)
PR_FORM_HOST_MAP = PropertyTag(0x3306, PropertyType.PT_MV_LONG)
PR_FORM_HIDDEN = PropertyTag(0x3307, PropertyType.PT_BOOLEAN)
PR_FORM_DESIGNER_NAME_W = PropertyTag(0x3308, PropertyType.PT_UNICODE)
PR_FORM_DESIGNER_NAME_A = PropertyTag(0x3308, PropertyType.PT_STRING8)
PR_FORM_DESIGNER_GUID = PropertyTag(0x3309, PropertyType.PT_CLSID)
PR_FORM_MESSAGE_BEHAVIOR = PropertyTag(0x330A, PropertyType.PT_LONG)

# Message store properties
PR_DEFAULT_STORE = PropertyTag(0x3400, PropertyType.PT_BOOLEAN)
PR_STORE_SUPPORT_MASK = PropertyTag(0x340D, PropertyType.PT_LONG)
PR_STORE_STATE = PropertyTag(0x340E, PropertyType.PT_LONG)
PR_IPM_SUBTREE_SEARCH_KEY = PropertyTag(0x3410, PropertyType.PT_BINARY)
PR_IPM_OUTBOX_SEARCH_KEY = PropertyTag(0x3411, PropertyType.PT_BINARY)
PR_IPM_WASTEBASKET_SEARCH_KEY = PropertyTag(0x3412, PropertyType.PT_BINARY)
PR_IPM_SENTMAIL_SEARCH_KEY = PropertyTag(0x3413, PropertyType.PT_BINARY)
PR_MDB_PROVIDER = PropertyTag(0x3414, PropertyType.PT_BINARY)
PR_RECEIVE_FOLDER_SETTINGS = PropertyTag(0x3415, PropertyType.PT_OBJECT)
PR_VALID_FOLDER_MASK = PropertyTag(0x35DF, PropertyType.PT_LONG)
PR_IPM_SUBTREE_ENTRYID = PropertyTag(0x35E0, PropertyType.PT_BINARY)
PR_IPM_OUTBOX_ENTRYID = PropertyTag(0x35E2, PropertyType.PT_BINARY)
PR_IPM_WASTEBASKET_ENTRYID = PropertyTag(0x35E3, PropertyType.PT_BINARY)
PR_IPM_SENTMAIL_ENTRYID = PropertyTag(0x35E4, PropertyType.PT_BINARY)
PR_VIEWS_ENTRYID = PropertyTag(0x35E5, PropertyType.PT_BINARY)
PR_COMMON_VIEWS_ENTRYID = PropertyTag(0x35E6, PropertyType.PT_BINARY)
PR_FINDER_ENTRYID = PropertyTag(0x35E7, PropertyType.PT_BINARY)

# Folder and address book container properties
PR_CONTAINER_FLAGS = PropertyTag(0x3600, PropertyType.PT_LONG)
PR_FOLDER_TYPE = PropertyTag(0x3601, PropertyType.PT_LONG)
PR_CONTENT_COUNT = PropertyTag(0x3602, PropertyType.PT_LONG)
PR_CONTENT_UNREAD = PropertyTag(0x3603, PropertyType.PT_LONG)
PR_CREATE_TEMPLATES = PropertyTag(0x3604, PropertyType.PT_OBJECT)
PR_DETAILS_TABLE = PropertyTag(0x3605, PropertyType.PT_OBJECT)
PR_SEARCH = PropertyTag(0x3607, PropertyType.PT_OBJECT)
PR_SELECTABLE = PropertyTag(0x3609, PropertyType.PT_BOOLEAN)
PR_SUBFOLDERS = PropertyTag(0x360A, PropertyType.PT_BOOLEAN)
PR_STATUS = PropertyTag(0x360B, PropertyType.PT_LONG)
PR_ANR_W = PropertyTag(0x360C, PropertyType.PT_UNICODE)
PR_ANR_A = PropertyTag(0x360C, PropertyType.PT_STRING8)
PR_CONTENTS_SORT_ORDER = PropertyTag(0x360D, PropertyType.PT_MV_LONG)
PR_CONTAINER_HIERARCHY = PropertyTag(0x360E, PropertyType.PT_OBJECT)
PR_CONTAINER_CONTENTS = PropertyTag(0x360F, PropertyType.PT_OBJECT)
PR_FOLDER_ASSOCIATED_CONTENTS = PropertyTag(0x3610, PropertyType.PT_OBJECT)
PR_DEF_CREATE_DL = PropertyTag(0x3611, PropertyType.PT_BINARY)
PR_DEF_CREATE_MAILUSER = PropertyTag(0x3612, PropertyType.PT_BINARY)
PR_CONTAINER_CLASS_W = PropertyTag(0x3613, PropertyType.PT_UNICODE)
PR_CONTAINER_CLASS_A = PropertyTag(0x3613, PropertyType.PT_STRING8)
PR_CONTAINER_MODIFY_VERSION = PropertyTag(0x3614, PropertyType.PT_I8)
PR_AB_PROVIDER_ID = PropertyTag(0x3615, PropertyType.PT_BINARY)
PR_DEFAULT_VIEW_ENTRYID = PropertyTag(0x3616, PropertyType.PT_BINARY)
PR_ASSOC_CONTENT_COUNT = PropertyTag(0x3617, PropertyType.PT_LONG)

# Attachment properties
PR_ATTACHMENT_X400_PARAMETERS = PropertyTag(0x3700, PropertyType.PT_BINARY)
PR_ATTACH_DATA_OBJ = PropertyTag(0x3701, PropertyType.PT_OBJECT)
PR_ATTACH_DATA_BIN = PropertyTag(0x3701, PropertyType.PT_BINARY)
PR_ATTACH_ENCODING = PropertyTag(0x3702, PropertyType.PT_BINARY)
PR_ATTACH_EXTENSION_W = PropertyTag(0x3703, PropertyType.PT_UNICODE)
PR_ATTACH_EXTENSION_A = PropertyTag(0x3703, PropertyType.PT_STRING8)
PR_ATTACH_FILENAME_W = PropertyTag(0x3704, PropertyType.PT_UNICODE)
PR_ATTACH_FILENAME_A = PropertyTag(0x3704, PropertyType.PT_STRING8)
PR_ATTACH_METHOD = PropertyTag(0x3705, PropertyType.PT_LONG)
PR_ATTACH_LONG_FILENAME_W = PropertyTag(0x3707, PropertyType.PT_UNICODE)
PR_ATTACH_LONG_FILENAME_A = PropertyTag(0x3707, PropertyType.PT_STRING8)
PR_ATTACH_PATHNAME_W = PropertyTag(0x3708, PropertyType.PT_UNICODE)
PR_ATTACH_PATHNAME_A = PropertyTag(0x3708, PropertyType.PT_STRING8)
PR_ATTACH_RENDERING = PropertyTag(0x3709, PropertyType.PT_BINARY)
PR_ATTACH_TAG = PropertyTag(0x370A, PropertyType.PT_BINARY)
PR_RENDERING_POSITION = PropertyTag(0x370B, PropertyType.PT_LONG)
PR_ATTACH_TRANSPORT_NAME_W = PropertyTag(0x370C, PropertyType.PT_UNICODE)
PR_ATTACH_TRANSPORT_NAME_A = PropertyTag(0x370C, PropertyType.PT_STRING8)

# Address book properties
PR_DISPLAY_TYPE = PropertyTag(0x3900, PropertyType.PT_LONG)
PR_TEMPLATEID = PropertyTag(0x3902, PropertyType.PT_BINARY)
PR_PRIMARY_CAPABILITY = PropertyTag(0x3904, PropertyType.PT_BINARY)

# Mail user properties
PR_ACCOUNT_W = PropertyTag(0x3A00, PropertyType.PT_UNICODE)
PR_ACCOUNT_A = PropertyTag(0x3A00, PropertyType.PT_STRING8)
PR_ALTERNATE_RECIPIENT = PropertyTag(0x3A01, PropertyType.PT_BINARY)
PR_CALLBACK_TELEPHONE_NUMBER_W = PropertyTag(0x3A02, PropertyType.PT_UNICODE)
PR_CALLBACK_TELEPHONE_NUMBER_A = PropertyTag(0x3A02, PropertyType.PT_STRING8)
PR_CONVERSION_PROHIBITED = PropertyTag(0x3A03, PropertyType.PT_BOOLEAN)
PR_DISCLOSE_RECIPIENTS = PropertyTag(0x3A04, PropertyType.PT_BOOLEAN)
PR_GENERATION_W = PropertyTag(0x3A05, PropertyType.PT_UNICODE)
PR_GENERATION_A = PropertyTag(0x3A05, PropertyType.PT_STRING8)
PR_GIVEN_NAME_W = PropertyTag(0x3A06, PropertyType.PT_UNICODE)
PR_GIVEN_NAME_A = PropertyTag(0x3A06, PropertyType.PT_STRING8)
PR_GOVERNMENT_ID_NUMBER_W = PropertyTag(0x3A07, PropertyType.PT_UNICODE)
PR_GOVERNMENT_ID_NUMBER_A = PropertyTag(0x3A07, PropertyType.PT_STRING8)
PR_BUSINESS_TELEPHONE_NUMBER_W = PropertyTag(0x3A08, PropertyType.PT_UNICODE)
PR_BUSINESS_TELEPHONE_NUMBER_A = PropertyTag(0x3A08, PropertyType.PT_STRING8)
PR_HOME_TELEPHONE_NUMBER_W = PropertyTag(0x3A09, PropertyType.PT_UNICODE)
PR_HOME_TELEPHONE_NUMBER_A = PropertyTag(0x3A09, PropertyType.PT_STRING8)
PR_INITIALS_W = PropertyTag(0x3A0A, PropertyType.PT_UNICODE)
PR_INITIALS_A = PropertyTag(0x3A0A, PropertyType.PT_STRING8)
PR_KEYWORD_W = PropertyTag(0x3A0B, PropertyType.PT_UNICODE)
PR_KEYWORD_A = PropertyTag(0x3A0B, PropertyType.PT_STRING8)
PR_LANGUAGE_W = PropertyTag(0x3A0C, PropertyType.PT_UNICODE)
PR_LANGUAGE_A = PropertyTag(0x3A0C, PropertyType.PT_STRING8)
PR_LOCATION_W = PropertyTag(0x3A0D, PropertyType.PT_UNICODE)
PR_LOCATION_A = PropertyTag(0x3A0D, PropertyType.PT_STRING8)
PR_MAIL_PERMISSION = PropertyTag(0x3A0E, PropertyType.PT_BOOLEAN)
PR_MHS_COMMON_NAME_W = PropertyTag(0x3A0F, PropertyType.PT_UNICODE)
PR_MHS_COMMON_NAME_A = PropertyTag(0x3A0F, PropertyType.PT_STRING8)
PR_ORGANIZATIONAL_ID_NUMBER_W = PropertyTag(0x3A10, PropertyType.PT_UNICODE)
PR_ORGANIZATIONAL_ID_NUMBER_A = PropertyTag(0x3A10, PropertyType.PT_STRING8)
PR_SURNAME_W = PropertyTag(0x3A11, PropertyType.PT_UNICODE)
PR_SURNAME_A = PropertyTag(0x3A11, PropertyType.PT_STRING8)
PR_ORIGINAL_ENTRYID = PropertyTag(0x3A12, PropertyType.PT_BINARY)
PR_ORIGINAL_DISPLAY_NAME_W = PropertyTag(0x3A13, PropertyType.PT_UNICODE)
PR_ORIGINAL_DISPLAY_NAME_A = PropertyTag(0x3A13, PropertyType.PT_STRING8)
PR_ORIGINAL_SEARCH_KEY = PropertyTag(0x3A14, PropertyType.PT_BINARY)
PR_POSTAL_ADDRESS_W = PropertyTag(0x3A15, PropertyType.PT_UNICODE)
PR_POSTAL_ADDRESS_A = PropertyTag(0x3A15, PropertyType.PT_STRING8)
PR_COMPANY_NAME_W = PropertyTag(0x3A16, PropertyType.PT_UNICODE)
PR_COMPANY_NAME_A = PropertyTag(0x3A16, PropertyType.PT_STRING8)
PR_TITLE_W = PropertyTag(0x3A17, PropertyType.PT_UNICODE)
PR_TITLE_A = PropertyTag(0x3A17, PropertyType.PT_STRING8)
PR_DEPARTMENT_NAME_W = PropertyTag(0x3A18, PropertyType.PT_UNICODE)
PR_DEPARTMENT_NAME_A = PropertyTag(0x3A18, PropertyType.PT_STRING8)
PR_OFFICE_LOCATION_W = PropertyTag(0x3A19, PropertyType.PT_UNICODE)
PR_OFFICE_LOCATION_A = PropertyTag(0x3A19, PropertyType.PT_STRING8)
PR_PRIMARY_TELEPHONE_NUMBER_W = PropertyTag(0x3A1A, PropertyType.PT_UNICODE)
PR_PRIMARY_TELEPHONE_NUMBER_A = PropertyTag(0x3A1A, PropertyType.PT_STRING8)
PR_BUSINESS2_TELEPHONE_NUMBER_W = PropertyTag(0x3A1B, PropertyType.PT_UNICODE)
PR_BUSINESS2_TELEPHONE_NUMBER_A = PropertyTag(0x3A1B, PropertyType.PT_STRING8)
PR_MOBILE_TELEPHONE_NUMBER_W = PropertyTag(0x3A1C, PropertyType.PT_UNICODE)
PR_MOBILE_TELEPHONE_NUMBER_A = PropertyTag(0x3A1C, PropertyType.PT_STRING8)
PR_RADIO_TELEPHONE_NUMBER_W = PropertyTag(0x3A1D, PropertyType.PT_UNICODE)
PR_RADIO_TELEPHONE_NUMBER_A = PropertyTag(0x3A1D, PropertyType.PT_STRING8)
PR_CAR_TELEPHONE_NUMBER_W = PropertyTag(0x3A1E, PropertyType.PT_UNICODE)
PR_CAR_TELEPHONE_NUMBER_A = PropertyTag(0x3A1E, PropertyType.PT_STRING8)
PR_OTHER_TELEPHONE_NUMBER_W = PropertyTag(0x3A1F, PropertyType.PT_UNICODE)
PR_OTHER_TELEPHONE_NUMBER_A = PropertyTag(0x3A1F, PropertyType.PT_STRING8)
PR_TRANSMITABLE_DISPLAY_NAME_W = PropertyTag(0x3A20, PropertyType.PT_UNICODE)
PR_TRANSMITABLE_DISPLAY_NAME_A = PropertyTag(0x3A20, PropertyType.PT_STRING8)
PR_PAGER_TELEPHONE_NUMBER_W = PropertyTag(0x3A21, PropertyType.PT_UNICODE)
PR_PAGER_TELEPHONE_NUMBER_A = PropertyTag(0x3A21, PropertyType.PT_STRING8)
PR_USER_CERTIFICATE = PropertyTag(0x3A22, PropertyType.PT_BINARY)
PR_PRIMARY_FAX_NUMBER_W = PropertyTag(0x3A23, PropertyType.PT_UNICODE)
PR_PRIMARY_FAX_NUMBER_A = PropertyTag(0x3A23, PropertyType.PT_STRING8)
PR_BUSINESS_FAX_NUMBER_W = PropertyTag(0x3A24, PropertyType.PT_UNICODE)
PR_BUSINESS_FAX_NUMBER_A = PropertyTag(0x3A24, PropertyType.PT_STRING8)
PR_HOME_FAX_NUMBER_W = PropertyTag(0x3A25, PropertyType.PT_UNICODE)
PR_HOME_FAX_NUMBER_A = PropertyTag(0x3A25, PropertyType.PT_STRING8)
PR_COUNTRY_W = PropertyTag(0x3A26, PropertyType.PT_UNICODE)
PR_COUNTRY_A = PropertyTag(0x3A26, PropertyType.PT_STRING8)
PR_LOCALITY_W = PropertyTag(0x3A27, PropertyType.PT_UNICODE)
PR_LOCALITY_A = PropertyTag(0x3A27, PropertyType.PT_STRING8)
PR_STATE_OR_PROVINCE_W = PropertyTag(0x3A28, PropertyType.PT_UNICODE)
PR_STATE_OR_PROVINCE_A = PropertyTag(0x3A28, PropertyType.PT_STRING8)
PR_STREET_ADDRESS_W = PropertyTag(0x3A29, PropertyType.PT_UNICODE)
PR_STREET_ADDRESS_A = PropertyTag(0x3A29, PropertyType.PT_STRING8)
PR_POSTAL_CODE_W = PropertyTag(0x3A2A, PropertyType.PT_UNICODE)
PR_POSTAL_CODE_A = PropertyTag(0x3A2A, PropertyType.PT_STRING8)
PR_POST_OFFICE_BOX_W = PropertyTag(0x3A2B, PropertyType.PT_UNICODE)
PR_POST_OFFICE_BOX_A = PropertyTag(0x3A2B, PropertyType.PT_STRING8)
PR_TELEX_NUMBER_W = PropertyTag(0x3A2C, PropertyType.PT_UNICODE)
PR_TELEX_NUMBER_A = PropertyTag(0x3A2C, PropertyType.PT_STRING8)
PR_ISDN_NUMBER_W = PropertyTag(0x3A2D, PropertyType.PT_UNICODE)
PR_ISDN_NUMBER_A = PropertyTag(0x3A2D, PropertyType.PT_STRING8)
PR_ASSISTANT_TELEPHONE_NUMBER_W = PropertyTag(0x3A2E, PropertyType.PT_UNICODE)
PR_ASSISTANT_TELEPHONE_NUMBER_A = PropertyTag(0x3A2E, PropertyType.PT_STRING8)
PR_HOME2_TELEPHONE_NUMBER_W = PropertyTag(0x3A2F, PropertyType.PT_UNICODE)
PR_HOME2_TELEPHONE_NUMBER_A = PropertyTag(0x3A2F, PropertyType.PT_STRING8)
PR_ASSISTANT_W = PropertyTag(0x3A30, PropertyType.PT_UNICODE)
PR_ASSISTANT_A = PropertyTag(0x3A30, PropertyType.PT_STRING8)
PR_SEND_RICH_INFO = PropertyTag(0x3A40, PropertyType.PT_BOOLEAN)

# Profile section properties
PR_STORE_PROVIDERS = PropertyTag(0x3D00, PropertyType.PT_BINARY)
PR_AB_PROVIDERS = PropertyTag(0x3D01, PropertyType.PT_BINARY)
PR_TRANSPORT_PROVIDERS = PropertyTag(0x3D02, PropertyType.PT_BINARY)
PR_DEFAULT_PROFILE = PropertyTag(0x3D04, PropertyType.PT_BOOLEAN)
PR_AB_SEARCH_PATH = PropertyTag(0x3D05, PropertyType.PT_MV_BINARY)
PR_AB_DEFAULT_DIR = PropertyTag(0x3D06, PropertyType.PT_BINARY)
PR_AB_DEFAULT_PAB = PropertyTag(0x3D07, PropertyType.PT_BINARY)
PR_FILTERING_HOOKS = PropertyTag(0x3D08, PropertyType.PT_BINARY)
PR_SERVICE_NAME_W = PropertyTag(0x3D09, PropertyType.PT_UNICODE)
PR_SERVICE_NAME_A = PropertyTag(0x3D09, PropertyType.PT_STRING8)
PR_SERVICE_DLL_NAME_W = PropertyTag(0x3D0A, PropertyType.PT_UNICODE)
PR_SERVICE_DLL_NAME_A = PropertyTag(0x3D0A, PropertyType.PT_STRING8)
PR_SERVICE_UID = PropertyTag(0x3D0C, PropertyType.PT_BINARY)
PR_SERVICE_EXTRA_UIDS = PropertyTag(0x3D0D, PropertyType.PT_BINARY)
PR_SERVICES = PropertyTag(0x3D0E, PropertyType.PT_BINARY)
PR_SERVICE_SUPPORT_FILES_W = PropertyTag(0x3D0F, PropertyType.PT_MV_UNICODE)
PR_SERVICE_SUPPORT_FILES_A = PropertyTag(0x3D0F, PropertyType.PT_MV_STRING8)
PR_SERVICE_DELETE_FILES_W = PropertyTag(0x3D10, PropertyType.PT_MV_UNICODE)
PR_SERVICE_DELETE_FILES_A = PropertyTag(0x3D10, PropertyType.PT_MV_STRING8)
PR_AB_SEARCH_PATH_UPDATE = PropertyTag(0x3D11, PropertyType.PT_BINARY)
PR_PROFILE_NAME_A = PropertyTag(0x3D12, PropertyType.PT_STRING8)
PR_PROFILE_NAME_W = PropertyTag(0x3D12, PropertyType.PT_UNICODE)

# Status object properties
PR_IDENTITY_DISPLAY_W = PropertyTag(0x3E00, PropertyType.PT_UNICODE)
PR_IDENTITY_DISPLAY_A = PropertyTag(0x3E00, PropertyType.PT_STRING8)
PR_IDENTITY_ENTRYID = PropertyTag(0x3E01, PropertyType.PT_BINARY)
PR_RESOURCE_METHODS = PropertyTag(0x3E02, PropertyType.PT_LONG)
PR_RESOURCE_TYPE = PropertyTag(0x3E03, PropertyType.PT_LONG)
PR_STATUS_CODE = PropertyTag(0x3E04, PropertyType.PT_LONG)
PR_IDENTITY_SEARCH_KEY = PropertyTag(0x3E05, PropertyType.PT_BINARY)
PR_OWN_STORE_ENTRYID = PropertyTag(0x3E06, PropertyType.PT_BINARY)
PR_RESOURCE_PATH_W = PropertyTag(0x3E07, PropertyType.PT_UNICODE)
PR_RESOURCE_PATH_A = PropertyTag(0x3E07, PropertyType.PT_STRING8)
PR_STATUS_STRING_W = PropertyTag(0x3E08, PropertyType.PT_UNICODE)
PR_STATUS_STRING_A = PropertyTag(0x3E08, PropertyType.PT_STRING8)
PR_X400_DEFERRED_DELIVERY_CANCEL = PropertyTag(0x3E09, PropertyType.PT_BOOLEAN)
PR_HEADER_FOLDER_ENTRYID = PropertyTag(0x3E0A, PropertyType.PT_BINARY)
PR_REMOTE_PROGRESS = PropertyTag(0x3E0B, PropertyType.PT_LONG)
PR_REMOTE_PROGRESS_TEXT_W = PropertyTag(0x3E0C, PropertyType.PT_UNICODE)
PR_REMOTE_PROGRESS_TEXT_A = PropertyTag(0x3E0C, PropertyType.PT_STRING8)
PR_REMOTE_VALIDATE_OK = PropertyTag(0x3E0D, PropertyType.PT_BOOLEAN)

# Display table properties
PR_CONTROL_FLAGS = PropertyTag(0x3F00, PropertyType.PT_LONG)
PR_CONTROL_STRUCTURE = PropertyTag(0x3F01, PropertyType.PT_BINARY)
PR_CONTROL_TYPE = PropertyTag(0x3F02, PropertyType.PT_LONG)
PR_DELTAX = PropertyTag(0x3F03, PropertyType.PT_LONG)
PR_DELTAY = PropertyTag(0x3F04, PropertyType.PT_LONG)
PR_XPOS = PropertyTag(0x3F05, PropertyType.PT_LONG)
PR_YPOS = PropertyTag(0x3F06, PropertyType.PT_LONG)
PR_CONTROL_ID = PropertyTag(0x3F07, PropertyType.PT_BINARY)
PR_INITIAL_DETAILS_PANE = PropertyTag(0x3F08, PropertyType.PT_LONG)

from enum import Enum

# Syntax error codes reported by the parser, one taxonomy per nesting level.
# Values are the X12 999/997 codes so they can be written straight into IK3/IK4/IK5.

class MessageErrorCode(str, Enum):
    """Transaction set (message) level syntax error codes (IK5/AK5)."""
    TRANSACTION_SET_NOT_SUPPORTED = "1"
    TRANSACTION_SET_TRAILER_MISSING = "2"
    CONTROL_NUMBER_MISMATCH = "3"
    SEGMENT_COUNT_MISMATCH = "4"
    ONE_OR_MORE_SEGMENTS_IN_ERROR = "5"
    INVALID_TRANSACTION_SET_IDENTIFIER = "6"
    INVALID_TRANSACTION_SET_CONTROL_NUMBER = "7"
    DUPLICATE_TRANSACTION_SET_CONTROL_NUMBER = "23"

class SegmentErrorCode(str, Enum):
    """Segment level syntax error codes (IK304)."""
    UNRECOGNIZED_SEGMENT = "1"
    UNEXPECTED_SEGMENT = "2"
    REQUIRED_SEGMENT_MISSING = "3"
    LOOP_OCCURS_OVER_MAXIMUM_TIMES = "4"
    SEGMENT_EXCEEDS_MAXIMUM_USE = "5"
    SEGMENT_NOT_IN_TRANSACTION_SET = "6"
    SEGMENT_NOT_IN_PROPER_SEQUENCE = "7"
    SEGMENT_HAS_DATA_ELEMENT_ERRORS = "8"
    NOT_USED_SEGMENT_PRESENT = "I4"
    DEPENDENT_SEGMENT_MISSING = "I6"
    LOOP_OCCURS_UNDER_MINIMUM_TIMES = "I7"
    SEGMENT_BELOW_MINIMUM_USE = "I8"
    DEPENDENT_NOT_USED_SEGMENT_PRESENT = "I9"

class DataElementErrorCode(str, Enum):
    """Data element level syntax error codes (IK403)."""
    REQUIRED_DATA_ELEMENT_MISSING = "1"
    CONDITIONAL_REQUIRED_DATA_ELEMENT_MISSING = "2"
    TOO_MANY_DATA_ELEMENTS = "3"
    DATA_ELEMENT_TOO_SHORT = "4"
    DATA_ELEMENT_TOO_LONG = "5"
    INVALID_CHARACTER = "6"
    INVALID_CODE_VALUE = "7"
    INVALID_DATE = "8"
    INVALID_TIME = "9"
    EXCLUSION_CONDITION_VIOLATED = "10"
    TOO_MANY_REPETITIONS = "12"
    TOO_MANY_COMPONENTS = "13"
    CODE_VALUE_NOT_USED = "I6"
    DEPENDENT_DATA_ELEMENT_MISSING = "I9"
    NOT_USED_DATA_ELEMENT_PRESENT = "I10"
    TOO_FEW_REPETITIONS = "I11"
    PATTERN_MATCH_FAILURE = "I12"
    DEPENDENT_NOT_USED_DATA_ELEMENT_PRESENT = "I13"

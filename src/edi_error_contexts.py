import logging
from types import MappingProxyType
from typing import Any, Dict, Iterable, List, Mapping, NamedTuple, Optional, Tuple

from pydantic import BaseModel, ConfigDict, PrivateAttr, TypeAdapter, computed_field

from edi_error_codes import DataElementErrorCode, MessageErrorCode, SegmentErrorCode

logger = logging.getLogger(__name__)

# Error contexts capture the syntax errors found while parsing a single message.
# The tree is message -> segments -> data elements, and a segment occurrence
# (its name plus its position in the message) is represented by exactly one context.

class SegmentKey(NamedTuple):
    """Identifies one occurrence of a segment within a message."""
    name: str
    position: int

# Keys are validated like the context fields, so "3" and 3 name the same occurrence.
_segment_key_adapter = TypeAdapter(SegmentKey)

def _segment_key(segment_name: str, segment_position: int) -> SegmentKey:
    return _segment_key_adapter.validate_python((segment_name, segment_position))

class ErrorContext(BaseModel):
    """Base for all error contexts."""
    model_config = ConfigDict(frozen=True)

    message: Optional[str] = None

class DataElementErrorContext(BaseModel):
    """A single data element that failed validation. Immutable once created."""
    model_config = ConfigDict(frozen=True)

    name: str
    position: int
    code: DataElementErrorCode
    # 0 means the element is not a component of a composite.
    component_position: int = 0
    # 0 means the element is not repeated.
    repetition_position: int = 0
    value: Optional[str] = None

class SegmentErrorContext(BaseModel):
    """
    Information for the data, error codes and the data elements of a segment that failed.
    Segment codes and data element errors are kept in the order they were reported.
    Identity fields are read-only; the code and error collections only grow.
    """
    model_config = ConfigDict(frozen=True)

    name: str
    position: int
    value: Optional[str] = None

    _codes: List[SegmentErrorCode] = PrivateAttr(default_factory=list)
    _errors: List[DataElementErrorContext] = PrivateAttr(default_factory=list)

    def __init__(
        self,
        name: str,
        position: int,
        value: Optional[str] = None,
        code: Optional[SegmentErrorCode] = None,
        **data: Any
    ):
        super().__init__(name=name, position=position, value=value, **data)
        if code is not None:
            self._codes.append(code)

    @property
    def key(self) -> SegmentKey:
        return SegmentKey(self.name, self.position)

    @computed_field
    @property
    def codes(self) -> Tuple[SegmentErrorCode, ...]:
        """The segment syntax error codes."""
        return tuple(self._codes)

    @computed_field
    @property
    def errors(self) -> Tuple[DataElementErrorContext, ...]:
        """The data element errors."""
        return tuple(self._errors)

    @property
    def has_errors(self) -> bool:
        return bool(self._codes or self._errors)

    def add_code(self, code: SegmentErrorCode):
        self._codes.append(code)

    def add_element_error(
        self,
        name: str,
        position: int,
        code: DataElementErrorCode,
        component_position: int = 0,
        repetition_position: int = 0,
        value: Optional[str] = None
    ):
        """Appends a data element error. Identical errors are not collapsed."""
        self._errors.append(DataElementErrorContext(
            name=name,
            position=position,
            code=code,
            component_position=component_position,
            repetition_position=repetition_position,
            value=value,
        ))

class MessageErrorContext(ErrorContext):
    """
    Information for the data, error codes and the context of the segments that failed.

    There can be only one context per segment occurrence, containing all the errors
    for that segment. A segment is identified by its name (or segment ID) and its position.
    """
    name: str
    control_number: str

    _codes: List[MessageErrorCode] = PrivateAttr(default_factory=list)
    _segments: Dict[SegmentKey, SegmentErrorContext] = PrivateAttr(default_factory=dict)

    def __init__(
        self,
        name: str,
        control_number: str,
        message: Optional[str] = None,
        code: Optional[MessageErrorCode] = None,
        **data: Any
    ):
        super().__init__(name=name, control_number=control_number, message=message, **data)
        if code is not None:
            self._codes.append(code)

    @computed_field
    @property
    def codes(self) -> Tuple[MessageErrorCode, ...]:
        """The message syntax error codes, in the order they were reported."""
        return tuple(self._codes)

    @property
    def segments(self) -> Mapping[SegmentKey, SegmentErrorContext]:
        """Read-only view of the segment error contexts keyed by segment occurrence."""
        return MappingProxyType(self._segments)

    @computed_field
    @property
    def errors(self) -> Tuple[SegmentErrorContext, ...]:
        """The segment error contexts."""
        return tuple(self._segments.values())

    @computed_field
    @property
    def has_errors(self) -> bool:
        """Indicates if the message had any errors when parsed. A message text alone is not an error."""
        return bool(self._codes or self._segments)

    def get_segment(self, segment_name: str, segment_position: int) -> Optional[SegmentErrorContext]:
        return self._segments.get(_segment_key(segment_name, segment_position))

    def add_message_error(self, code: MessageErrorCode):
        """Adds a syntax error code to the message codes. Repeated codes are kept."""
        self._codes.append(code)

    def add_segment_error(
        self,
        segment_name: str,
        segment_position: int,
        value: Optional[str],
        code: SegmentErrorCode
    ):
        """
        Adds a segment syntax error code to the context for that segment,
        creating the context on the first error reported for it.

        Args:
            segment_name: The segment name (or segment ID)
            segment_position: The segment position within the message
            value: The raw segment value
            code: The segment syntax error code
        """
        key = _segment_key(segment_name, segment_position)
        segment_context = self._segments.get(key)
        if segment_context is not None:
            segment_context.add_code(code)
            logger.debug(f"Added segment code {code} to existing context {key} in message {self.name}/{self.control_number}")
        else:
            segment_context = SegmentErrorContext(segment_name, segment_position, value, code)
            self._segments[segment_context.key] = segment_context
            logger.debug(f"Created segment context {key} with code {code} in message {self.name}/{self.control_number}")

    def add_element_error(
        self,
        segment_name: str,
        segment_position: int,
        segment_value: Optional[str],
        name: str,
        position: int,
        code: DataElementErrorCode,
        component_position: int = 0,
        repetition_position: int = 0,
        value: Optional[str] = None
    ):
        """
        Adds a data element error to the context for its segment,
        creating the context (with no segment codes) on the first error reported for it.

        Args:
            segment_name: The segment name (or segment ID)
            segment_position: The segment position within the message
            segment_value: The raw segment value
            name: The data element name
            position: The data element position within the segment
            code: The data element syntax error code
            component_position: The component position, 0 if not a composite
            repetition_position: The repetition position, 0 if not repeated
            value: The data element value
        """
        key = _segment_key(segment_name, segment_position)
        segment_context = self._segments.get(key)
        if segment_context is not None:
            segment_context.add_element_error(name, position, code, component_position, repetition_position, value)
        else:
            # Inserted only once the element error is recorded.
            segment_context = SegmentErrorContext(segment_name, segment_position, segment_value)
            segment_context.add_element_error(name, position, code, component_position, repetition_position, value)
            self._segments[segment_context.key] = segment_context
            logger.debug(f"Created segment context {key} for element error in message {self.name}/{self.control_number}")
        logger.debug(f"Added element error {name} ({code}) to segment context {key}")

    def merge(self, segment_context: SegmentErrorContext):
        """
        Merges a segment context into the segment contexts.

        If a context for the same segment occurrence already exists, only the data element
        errors of the incoming context are added to it; its segment codes are not copied.
        Otherwise the incoming context is inserted as is, segment codes included.
        """
        key = segment_context.key
        existing = self._segments.get(key)
        if existing is None:
            self._segments[key] = segment_context
            logger.debug(f"Merged new segment context {key} into message {self.name}/{self.control_number}")
            return

        for error in segment_context.errors:
            existing.add_element_error(
                error.name,
                error.position,
                error.code,
                error.component_position,
                error.repetition_position,
                error.value
            )
        logger.debug(f"Merged {len(segment_context.errors)} element error(s) into existing segment context {key}")

    def merge_all(self, segment_contexts: Iterable[SegmentErrorContext]):
        for segment_context in segment_contexts:
            self.merge(segment_context)

    def merge_context(self, other: 'MessageErrorContext'):
        """
        Merges the result of another validation pass over the same message.
        Message codes are appended and segment contexts merged as in `merge`.

        Raises:
            ValueError: If the other context is for a different message
        """
        if (other.name, other.control_number) != (self.name, self.control_number):
            logger.warning(
                f"Refusing to merge context {other.name}/{other.control_number} into {self.name}/{self.control_number}"
            )
            raise ValueError(
                f"Cannot merge error context for message {other.name}/{other.control_number} "
                f"into {self.name}/{self.control_number}"
            )
        self._codes.extend(other.codes)
        self.merge_all(other.errors)

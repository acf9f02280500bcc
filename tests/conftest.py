# FILE: tests/conftest.py

import pytest
import sys
import os
import logging

# Add src directory to path for imports
sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..', 'src'))

from edi_error_contexts import MessageErrorContext, SegmentErrorContext
from edi_error_codes import DataElementErrorCode, SegmentErrorCode

# ==============================================================================
# PYTEST CONFIGURATION & HOOKS
# ==============================================================================

def pytest_configure(config):
    """Configure pytest settings and markers."""
    config.addinivalue_line("markers", "unit: Pure unit tests with no external dependencies.")

@pytest.fixture(scope="session", autouse=True)
def setup_test_environment(pytestconfig):
    """Set up test environment with logging configuration."""
    # Use pytest's log_cli_level if available, otherwise default to INFO
    log_level = pytestconfig.getoption("log_cli_level") or "INFO"
    logging.basicConfig(
        level=log_level.upper(),
        format="[%(asctime)s] [%(levelname)s] [%(name)s:%(lineno)d] - %(message)s",
        stream=sys.stdout,
        force=True,
    )
    logging.info(f"Test logging configured with level: {log_level.upper()}")
    yield

# ==============================================================================
# UNIT TEST FIXTURES
# ==============================================================================

@pytest.fixture
def empty_850_context() -> MessageErrorContext:
    """A purchase order message context with nothing reported yet."""
    return MessageErrorContext("850", "0001")

@pytest.fixture
def n1_segment_context() -> SegmentErrorContext:
    """
    A segment context as built by an independent validation pass:
    one segment code and two data element errors.
    """
    segment_context = SegmentErrorContext("N1", 5, "N1*ST*ACME*92*", SegmentErrorCode.SEGMENT_HAS_DATA_ELEMENT_ERRORS)
    segment_context.add_element_error("N103", 3, DataElementErrorCode.INVALID_CODE_VALUE, value="92")
    segment_context.add_element_error("N104", 4, DataElementErrorCode.CONDITIONAL_REQUIRED_DATA_ELEMENT_MISSING)
    return segment_context

#!/usr/bin/env python3
"""
hbsdcontrol Core Constants - Extended attribute namespace and value encoding

This module contains the constants shared by the attribute store adapters
and the feature state engine.

Copyright (C) 2025 Marc Rivero Lopez
Licensed under the GNU General Public License v3.0 (GPLv3)
"""

# =============================================================================
# Extended Attribute Namespace
# =============================================================================
# Every PaX feature attribute lives in the system namespace; it is fixed and
# never taken from user input or configuration.
ATTRIBUTE_NAMESPACE = "system"
ATTRIBUTE_PREFIX = "hbsd.pax."

# =============================================================================
# Attribute Listing Wire Format
# =============================================================================
# extattr_list_file(2) returns entries made of one length byte followed by
# that many bytes of name, with no terminator and no overall count.
LIST_LENGTH_PREFIX_BYTES = 1
MAX_ATTRIBUTE_NAME_LENGTH = 255
DEFAULT_LIST_BUFFER_LIMIT = 1 * 1024 * 1024  # Upper bound for one listing

# =============================================================================
# Attribute Values
# =============================================================================
# Values are stored as a decimal digit string: b"0" or b"1".
VALUE_DISABLED = 0
VALUE_ENABLED = 1
VALID_STATE_VALUES = (VALUE_DISABLED, VALUE_ENABLED)

# =============================================================================
# CLI
# =============================================================================
MAX_VERBOSITY = 3
EXIT_SUCCESS = 0
EXIT_FAILURE = 1

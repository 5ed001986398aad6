#!/usr/bin/env python3
"""
hbsdcontrol feature state modules
"""

from .attr_list_decoder import AttributeListReader, decode, decode_entries, encode
from .state_reconciler import reconcile, resolve_feature

__all__ = [
    "AttributeListReader",
    "decode",
    "decode_entries",
    "encode",
    "reconcile",
    "resolve_feature",
]

"""
csp-policy - Content-Security-Policy header value builder
"""

__version__ = "0.1.0"

from csp_policy.policy import (
    CSP_HEADER,
    CSP_HEADER_LEGACY,
    CSP_HEADER_REPORT_ONLY,
    NONE,
    SELF,
    PolicyConfig,
)
from csp_policy.serializer import build_headers, header_name, quote_if_reserved, render

__all__ = [
    'CSP_HEADER',
    'CSP_HEADER_LEGACY',
    'CSP_HEADER_REPORT_ONLY',
    'NONE',
    'SELF',
    'PolicyConfig',
    'build_headers',
    'header_name',
    'quote_if_reserved',
    'render',
]

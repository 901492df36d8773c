"""Pure-function CSP (Content-Security-Policy) serialization."""

from __future__ import annotations

from csp_policy.policy import (
    CATEGORIES,
    CSP_HEADER,
    CSP_HEADER_LEGACY,
    CSP_HEADER_REPORT_ONLY,
    NONE,
    RESERVED_KEYWORDS,
    UNSAFE_EVAL,
    UNSAFE_INLINE,
    Category,
    PolicyConfig,
)

END_BLOCK = ";"

# Fallback when no default scope is configured. The trailing space is part of
# the emitted header value ("default-src 'none' ;").
_UNSET_DEFAULT = "'none' "


def quote_if_reserved(token: str) -> str:
    """Single-quote ``token`` if it is a bare CSP keyword.

    Example:
        >>> quote_if_reserved("self")
        "'self'"
        >>> quote_if_reserved("https://a.com")
        'https://a.com'
    """
    if token in RESERVED_KEYWORDS:
        return f"'{token}'"
    return token


def is_unset(default_scope: str | None) -> bool:
    """True when no default scope was given (None, empty or whitespace-only)."""
    return default_scope is None or not default_scope.strip()


def resolve_default(default_scope: str | None) -> str:
    """Return the ``default-src`` value for a configured default scope."""
    if is_unset(default_scope):
        return _UNSET_DEFAULT
    return quote_if_reserved(default_scope)


def render_block(category: Category, config: PolicyConfig, covering: str) -> str:
    """Render one category directive, or "" when default-src already covers it.

    ``covering`` is the token default-src stands for: the resolved default
    scope, or ``NONE`` when no scope was configured.

    Source entries are written as given. Only the default scope goes through
    keyword quoting, so list callers should use the pre-quoted ``SELF`` and
    ``NONE`` tokens.
    """
    entries = config.sources(category)
    if not entries and category.default == covering:
        return ""

    parts = [category.tag]
    if entries:
        parts.extend(entries)
    else:
        parts.append(category.default)

    if category.tag == "script-src":
        if config.allow_eval:
            parts.append(UNSAFE_EVAL)
        if config.allow_inline_script:
            parts.append(UNSAFE_INLINE)
    elif category.tag == "style-src":
        if config.allow_inline_style:
            parts.append(UNSAFE_INLINE)

    return " ".join(parts) + END_BLOCK


def render(config: PolicyConfig) -> str:
    """Build the header value for ``config``.

    Always starts with ``default-src``; the eight category directives follow
    in fixed order, each terminated by ``;`` with no separator between them.

    Example:
        >>> render(PolicyConfig())
        "default-src 'none' ;font-src 'self';img-src 'self';style-src 'self';script-src 'self';"
    """
    resolved_default = resolve_default(config.default_scope)
    covering = NONE if is_unset(config.default_scope) else resolved_default
    blocks = [f"default-src {resolved_default}{END_BLOCK}"]
    blocks.extend(render_block(category, config, covering) for category in CATEGORIES)
    return "".join(blocks)


def render_report_uri(config: PolicyConfig) -> str:
    """Return a ``report-uri`` directive for the reporting URL, or ""."""
    url = config.reporting_url
    if not url or not url.strip():
        return ""
    return f"report-uri {url.strip()}{END_BLOCK}"


def header_name(report_only: bool = False) -> str:
    """Pick the enforcing or report-only header name."""
    return CSP_HEADER_REPORT_ONLY if report_only else CSP_HEADER


def build_headers(
    config: PolicyConfig,
    *,
    report_only: bool = False,
    include_legacy: bool = False,
    include_report_uri: bool = False,
) -> dict[str, str]:
    """Map header name(s) to the rendered policy value.

    With ``include_legacy`` the same value is repeated under
    ``X-Content-Security-Policy``. No response object is touched.
    """
    value = render(config)
    if include_report_uri:
        value += render_report_uri(config)

    headers = {header_name(report_only): value}
    if include_legacy:
        headers[CSP_HEADER_LEGACY] = value
    return headers

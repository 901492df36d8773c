"""
csp-policy CLI
"""
import argparse
import sys

import structlog

from csp_policy.config.loader import PolicyFileError, get_settings, load_policy
from csp_policy.logging_config import setup_logging
from csp_policy.serializer import build_headers, render

logger = structlog.get_logger()


def main(argv=None):
    """Main CLI entry point"""
    parser = argparse.ArgumentParser(
        prog="csp_policy",
        description="Build a Content-Security-Policy header value from a YAML policy file",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Print the header value for the default (empty) policy
  python -m csp_policy render

  # Render a policy file
  python -m csp_policy render --config policy.yaml

  # Print header lines for a report-only rollout, with report-uri
  python -m csp_policy headers --config policy.yaml --report-only --report-uri
        """
    )

    subparsers = parser.add_subparsers(dest='command', help='Available commands')

    render_parser = subparsers.add_parser('render', help='Print the policy header value')
    render_parser.add_argument('--config', help='YAML policy file (defaults to CSP_POLICY_FILE)')

    headers_parser = subparsers.add_parser('headers', help='Print "Name: value" header lines')
    headers_parser.add_argument('--config', help='YAML policy file (defaults to CSP_POLICY_FILE)')
    headers_parser.add_argument('--report-only', action='store_true', default=None,
                                help='Use the report-only header name')
    headers_parser.add_argument('--legacy', action='store_true', default=None,
                                help='Also emit X-Content-Security-Policy')
    headers_parser.add_argument('--report-uri', action='store_true', default=None,
                                help='Append a report-uri directive when reporting_url is set')

    args = parser.parse_args(argv)

    if not args.command:
        parser.print_help()
        return 1

    settings = get_settings()
    setup_logging(settings.log_level, settings.log_json)
    logger.debug("config_loaded", policy_file=settings.policy_file, report_only=settings.report_only)

    try:
        config = load_policy(args.config)
    except PolicyFileError as e:
        logger.error("policy_file_error", error=str(e))
        return 1

    if args.command == 'render':
        print(render(config))
        return 0

    headers = build_headers(
        config,
        report_only=_pick(args.report_only, settings.report_only),
        include_legacy=_pick(args.legacy, settings.include_legacy_header),
        include_report_uri=_pick(args.report_uri, settings.include_report_uri),
    )
    for name, value in headers.items():
        print(f"{name}: {value}")
    return 0


def _pick(flag, setting):
    """CLI flag wins when given, otherwise fall back to the env setting."""
    return setting if flag is None else flag


if __name__ == '__main__':
    sys.exit(main())

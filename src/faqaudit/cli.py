"""Command-line interface for the QA structure auditor."""

import argparse
import logging
import sys
from typing import List, Optional

from faqaudit.config import Config, DetectionSettings, settings
from faqaudit.constants import DEFAULT_REPORT_PATH
from faqaudit.logging_config import setup_logging
from faqaudit.output_manager import OutputManager
from faqaudit.report_generator import format_report_summary, generate_report
from faqaudit.site_crawler import QACrawler

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser for the faqaudit command."""
    parser = argparse.ArgumentParser(
        prog="faqaudit",
        description="Audit the schema.org Question/Answer markup of web pages",
    )
    parser.add_argument("urls", nargs="*", help="URLs to audit")
    parser.add_argument("--urls-file", metavar="FILE",
                        help="Text file with one URL per line (# starts a comment)")
    parser.add_argument("--browser", action="store_true",
                        help="Render pages with a headless browser (requires: pip install 'faqaudit[browser]')")
    parser.add_argument("--rate-limit", type=float, default=None,
                        help="Seconds to wait between requests (default: 1.0)")
    parser.add_argument("--timeout", type=int, default=None,
                        help="Request timeout in seconds (default: 10)")
    parser.add_argument("--output", default=None,
                        help=f"Path of the JSON report (default: {DEFAULT_REPORT_PATH})")
    parser.add_argument("--config", metavar="FILE",
                        help="JSON file with detection settings")
    parser.add_argument("--container", default=None,
                        help="CSS selector of the content container scanned for question headings")
    parser.add_argument("--strict-exclusion", action="store_true",
                        help="Do not report headings already enclosed in a schema.org Question block")
    parser.add_argument("--log-level", default=settings.LOG_LEVEL.upper(), type=str.upper,
                        choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
                        help="Log level (default: INFO)")
    parser.add_argument("--log-file", default=settings.LOG_FILE,
                        help="Also write logs to this file")
    return parser


def _load_detection(args) -> DetectionSettings:
    if args.config:
        detection = DetectionSettings.from_file(args.config)
    else:
        detection = DetectionSettings.from_env()

    if args.container:
        detection.container_selector = args.container
    if args.strict_exclusion:
        detection.exclude_structured_headings = True
    return detection


def _load_config(args) -> Config:
    config = Config.from_env()
    if args.rate_limit is not None:
        config.rate_limit = args.rate_limit
    if args.timeout is not None:
        config.timeout = args.timeout
    if args.output is not None:
        config.output_path = args.output
    if args.browser:
        config.use_browser = True
    config.log_level = args.log_level
    return config


def main(argv: Optional[List[str]] = None) -> int:
    """Run the audit; returns the process exit code."""
    parser = build_parser()
    args = parser.parse_args(argv)

    setup_logging(level=args.log_level, log_file=args.log_file)

    output_mgr = OutputManager()
    urls = list(args.urls)
    if args.urls_file:
        urls.extend(output_mgr.load_urls(args.urls_file))

    if not urls:
        print("Error: no URL to audit. Pass URLs as arguments or use --urls-file.", file=sys.stderr)
        return 1

    config = _load_config(args)
    detection = _load_detection(args)

    logger.info(f"Auditing {len(urls)} URLs (browser={config.use_browser})")
    crawler = QACrawler(config=config, detection=detection)
    results = crawler.crawl_multiple_urls(urls)
    report = generate_report(results)

    output_path = output_mgr.save_report(report, config.output_path)

    print(format_report_summary(report))
    print(f"\nReport saved to {output_path}")
    return 0


if __name__ == "__main__":
    sys.exit(main())

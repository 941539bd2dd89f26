"""
Print BibTeX entries for one or more URLs.

For each URL this script:
1. Asks the DOI registry for a BibTeX entry if the URL is a doi.org link
2. Otherwise scrapes the page's JSON-LD or meta tags
3. Prints the entry, or the error, and moves on to the next URL

The exit status reflects the last failure: 2 for a malformed URL,
3 for a transport failure, 4 when nothing could be extracted.
"""

import logging
import sys
from pathlib import Path

# Allow running from a checkout without installing
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from config.settings import settings
from bibscraper.errors import (
    BibtexError,
    ExtractionError,
    MalformedURLError,
    TransportError,
)
from bibscraper.fetcher import get_default_session
from bibscraper.pipeline import BibtexExtractor

EXIT_CODES = {
    MalformedURLError: 2,
    TransportError: 3,
    ExtractionError: 4,
}


def exit_code_for(error: BibtexError) -> int:
    for error_type, code in EXIT_CODES.items():
        if isinstance(error, error_type):
            return code
    return 1


def resolve_log_level(verbose: bool):
    """Map --verbose and LOG_LEVEL to a level logging accepts."""
    if verbose:
        return logging.DEBUG
    return settings.log_level.strip().upper()


def main(argv=None) -> int:
    import argparse

    parser = argparse.ArgumentParser(
        description="Generate BibTeX entries for web pages and DOI links"
    )
    parser.add_argument("urls", nargs="+", help="Page or DOI URLs to cite")
    parser.add_argument(
        "--timeout",
        type=float,
        default=None,
        help="Request timeout in seconds (default: transport default)",
    )
    parser.add_argument(
        "--verbose",
        action="store_true",
        help="Enable debug logging",
    )

    args = parser.parse_args(argv)

    logging.basicConfig(
        level=resolve_log_level(args.verbose),
        format="-> %(message)s",
        stream=sys.stderr,
    )

    extractor = BibtexExtractor(session=get_default_session(), timeout=args.timeout)
    status = 0
    printed = 0

    for url in args.urls:
        try:
            entry = extractor.extract(url)
        except BibtexError as e:
            print(f"Error: {e.message}", file=sys.stderr)
            status = exit_code_for(e)
            continue

        if printed:
            print()
        print(entry)
        printed += 1

    return status


if __name__ == "__main__":
    sys.exit(main())

"""Argument parsing functionality for esmpath."""

import argparse


def _add_common_options(parser):
    parser.add_argument("--loglevel", "--log-level",
                        dest="LOG_LEVEL",
                        help="Set the logging level",
                        action="store",
                        type=str.upper,
                        choices=['DEBUG', 'INFO', 'WARNING', 'ERROR', 'CRITICAL'])
    parser.add_argument("--logfile",
                        dest="LOG_FILE",
                        help="Log output file",
                        action="store",
                        type=str)
    parser.add_argument("-c", "--config",
                        dest="CONFIG",
                        help="Path to configuration file (YAML, YML, or JSON)",
                        action="store",
                        type=str)


def parse_args(argv=None):
    """Parses the arguments passed to the program."""
    parser = argparse.ArgumentParser(
        prog="esmpath",
        description=(
            "esmpath - ES module specifier and path utilities"
        ),
        add_help=True,
    )
    sub = parser.add_subparsers(dest="action", required=True)

    classify = sub.add_parser("classify", help="Classify specifiers as remote, local or bare")
    classify.add_argument("SPECIFIERS", nargs="+", help="Specifiers to classify")

    match = sub.add_parser("match", help="Extract name@version information from a path")
    match.add_argument("PATH", help="Request path or package reference")

    key = sub.add_parser("key", help="Print the canonical module key of a specifier")
    key.add_argument("SPECIFIER", help="Specifier to normalize")

    compare = sub.add_parser("compare", help="Check whether version A precedes version B")
    compare.add_argument("VERSION_A", help="Exact semantic version")
    compare.add_argument("VERSION_B", help="Exact semantic version")

    scan = sub.add_parser("scan", help="List module files under a directory")
    scan.add_argument("ROOT", help="Directory to scan")
    scan.add_argument("-e", "--ext",
                      dest="EXTENSIONS",
                      help="Keep files with this extension (repeatable)",
                      action="append",
                      type=str)
    scan.add_argument("--sort",
                      dest="SORT",
                      help="Sort the output lexically",
                      action="store_true")

    encode = sub.add_parser("encode", help="URL-safe base64 encode text")
    encode.add_argument("TEXT", help="UTF-8 text to encode")

    decode = sub.add_parser("decode", help="Decode a URL-safe base64 token")
    decode.add_argument("TOKEN", help="Token without padding")

    for p in (classify, match, key, compare, scan, encode, decode):
        _add_common_options(p)

    return parser.parse_args(argv)

"""esmpath - ES module specifier and path utilities

    Returns:
        int: Exit code
"""
import binascii
import json
import logging
import sys

from args import parse_args
from cli_config import load_config, scan_extensions, setup_logging
from common.codec import atob_url, btoa_url, remove_http_prefix
from common.helpers import ends_with
from constants import Constants, ExitCodes
from scanning.tree import find_files
from specifier.classifier import classify_specifier, module_key, split_bare_specifier
from specifier.models import SpecifierKind
from specifier.patterns import has_path_with_version, match_versioned_path
from versioning.semver import InvalidVersionError, semver_less_than


def cmd_classify(args):
    """Prints one JSON object per specifier with its classification."""
    result = [
        {"specifier": s, "kind": classify_specifier(s).value}
        for s in args.SPECIFIERS
    ]
    print(json.dumps(result, indent=2))


def cmd_match(args):
    """Prints pinned version details found in a path."""
    path = args.PATH
    if classify_specifier(path) is SpecifierKind.REMOTE:
        path = remove_http_prefix(path)
    m = match_versioned_path(path)
    out = {
        "path": args.PATH,
        "pinned": m is not None,
        "has_version": has_path_with_version(path),
    }
    if m is not None:
        out.update({
            "boundary_char": m.boundary_char,
            "version": m.version,
            "separator": m.separator,
            "commit_hash": m.is_commit_hash,
        })
    if classify_specifier(args.PATH) is SpecifierKind.BARE and args.PATH:
        bare = split_bare_specifier(args.PATH)
        out.update({"name": bare.name, "subpath": bare.subpath})
    print(json.dumps(out, indent=2))


def cmd_key(args):
    print(module_key(args.SPECIFIER))


def cmd_compare(args):
    print(json.dumps(semver_less_than(args.VERSION_A, args.VERSION_B)))


def cmd_scan(args, config):
    exts = scan_extensions(args, config)
    files = find_files(args.ROOT, "", lambda p: ends_with(p, *exts))
    if args.SORT:
        files.sort()
    sys.stdout.write("".join(f + Constants.EOL for f in files))


def cmd_encode(args):
    print(btoa_url(args.TEXT))


def cmd_decode(args):
    print(atob_url(args.TOKEN).decode("utf-8", errors="replace"))


def run(args):
    """Dispatches the parsed command; returns an exit code."""
    try:
        config = load_config(getattr(args, "CONFIG", None))
    except (OSError, ValueError) as e:
        logging.error("Config error: %s, aborting", e)
        return ExitCodes.FILE_ERROR.value
    setup_logging(args, config)

    try:
        if args.action == "classify":
            cmd_classify(args)
        elif args.action == "match":
            cmd_match(args)
        elif args.action == "key":
            cmd_key(args)
        elif args.action == "compare":
            cmd_compare(args)
        elif args.action == "scan":
            cmd_scan(args, config)
        elif args.action == "encode":
            cmd_encode(args)
        elif args.action == "decode":
            cmd_decode(args)
    except InvalidVersionError as e:
        logging.error("%s", e)
        return ExitCodes.INVALID_INPUT.value
    except binascii.Error as e:
        logging.error("Invalid token: %s", e)
        return ExitCodes.INVALID_INPUT.value
    except OSError as e:
        logging.error("File error: %s, aborting", e)
        return ExitCodes.FILE_ERROR.value
    except ValueError as e:
        logging.error("%s", e)
        return ExitCodes.INVALID_INPUT.value
    return ExitCodes.SUCCESS.value


def main(argv=None):
    """Main function of the program."""
    sys.exit(run(parse_args(argv)))


if __name__ == "__main__":
    main()

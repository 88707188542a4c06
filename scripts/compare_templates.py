"""
Scores exported SketchAuth templates against each other.

Useful for tuning the threshold: export the template after a few attempts
at the same gesture (and a few at different ones) and see how far apart
their scores land.

Usage:
    python scripts/compare_templates.py reference.json attempt1.json attempt2.json --threshold 18
"""
import argparse
import logging
import sys
from pathlib import Path

# --- Path Setup ---
# This script is intended to be run from the project root directory without
# installing the package.
PROJECT_ROOT = Path(__file__).resolve().parent.parent
if str(PROJECT_ROOT / "src") not in sys.path:
    sys.path.append(str(PROJECT_ROOT / "src"))

from sketchauth.core.errors import MalformedTemplateError
from sketchauth.core.matcher import match
from sketchauth.core.session import DEFAULT_THRESHOLD
from sketchauth.core.template_store import decode_template

logger = logging.getLogger("compare_templates")


def load_template(path: Path):
    try:
        return decode_template(path.read_bytes())
    except (OSError, MalformedTemplateError) as e:
        logger.error(f"Skipping {path}: {e}")
        return None


def main(argv=None) -> int:
    parser = argparse.ArgumentParser(description="Score exported sketch templates against a reference.")
    parser.add_argument("reference", type=Path, help="Template file used as the saved pattern.")
    parser.add_argument("candidates", type=Path, nargs="+", help="Template files to score.")
    parser.add_argument("--threshold", type=float, default=DEFAULT_THRESHOLD,
                        help=f"Highest accepted score (default {DEFAULT_THRESHOLD:g}).")
    args = parser.parse_args(argv)

    logging.basicConfig(level=logging.WARNING, format='%(levelname)s - %(message)s')

    reference = load_template(args.reference)
    if reference is None:
        return 1

    print(f"Reference: {args.reference} ({len(reference)} points), threshold {args.threshold:g}")
    for path in args.candidates:
        candidate = load_template(path)
        if candidate is None:
            continue
        result = match(candidate, reference, args.threshold)
        verdict = "ACCEPT" if result.accepted else "reject"
        print(f"  {verdict:6}  {result.score:8.2f}  {path}")
    return 0


if __name__ == '__main__':
    sys.exit(main())

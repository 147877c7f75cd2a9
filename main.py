"""
Main module for the example render launcher.
Builds and runs one example with the configured build tool and saves its
standard output as output/<example>-<epoch-seconds>.<ext>.
"""

import sys
import argparse
from typing import List, Optional

from utils.logger import setup_logger
from launcher import Launcher, VARIANTS, discover_examples, get_variant

from config import DEFAULT_PROFILE, DEFAULT_VARIANT, EXAMPLES_DIR, OUTPUT_DIR, PROJECT_DIR

logger = setup_logger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description='Example render launcher - build and run an example, save its output image',
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  python main.py cornell_box                         # dev-raytrace profile, output/cornell_box-<ts>.ppm
  python main.py cornell_box dev                     # Explicit profile
  python main.py cornell_box --variant release       # Optimized build, output/cornell_box-<ts>.ppm
  python main.py cornell_box --variant build-run     # Build, then run the binary, output/cornell_box-<ts>.png
  python main.py --list                              # Show available examples
        """
    )

    parser.add_argument(
        'example',
        nargs='?',
        help='Example to build and run'
    )

    parser.add_argument(
        'profile',
        nargs='?',
        help=f'Build profile (default: {DEFAULT_PROFILE}; ignored by the release variant)'
    )

    parser.add_argument(
        '--variant',
        choices=sorted(VARIANTS),
        default=DEFAULT_VARIANT,
        help=f'How to build and run the example (default: {DEFAULT_VARIANT})'
    )

    parser.add_argument(
        '--output-dir',
        default=OUTPUT_DIR,
        help=f'Existing directory for output files (default: {OUTPUT_DIR})'
    )

    parser.add_argument(
        '--project-dir',
        default=PROJECT_DIR,
        help=f'Project the build tool runs in (default: {PROJECT_DIR})'
    )

    parser.add_argument(
        '--no-inspect',
        action='store_true',
        help='Skip opening the finished image with Pillow'
    )

    parser.add_argument(
        '--list',
        action='store_true',
        help='List the examples found in the project and exit'
    )

    return parser


def main(argv: Optional[List[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    if args.list:
        for name in discover_examples(args.project_dir, EXAMPLES_DIR):
            print(name)
        return 0

    if not args.example:
        parser.error("the following arguments are required: example")

    launcher = Launcher(
        variant=get_variant(args.variant),
        output_dir=args.output_dir,
        project_dir=args.project_dir,
        inspect=not args.no_inspect,
    )

    try:
        result = launcher.launch(args.example, args.profile)
    except OSError as e:
        logger.error(f"Error launching '{args.example}': {e}")
        return 1

    # Killed by a signal: report it the way a shell does (128 + signal number)
    if result.returncode < 0:
        return 128 - result.returncode
    return result.returncode


if __name__ == "__main__":
    sys.exit(main())

#!/usr/bin/env python3
"""
Career Path Decision System - console entry point.
"""
import argparse
import logging

from config import get_config


def main(argv=None):
    config = get_config()

    parser = argparse.ArgumentParser(description="Interactive career path assessment.")
    parser.add_argument("--questions", default=config.QUESTIONS_FILE_PATH,
                        help="Path of the JSON question file (default: %(default)s)")
    parser.add_argument("--reports-dir", default=config.REPORTS_DIR,
                        help="Directory for saved CareerPath_*.txt reports (default: %(default)s)")
    args = parser.parse_args(argv)

    config.QUESTIONS_FILE_PATH = args.questions
    config.REPORTS_DIR = args.reports_dir

    logging.basicConfig(
        level=getattr(logging, config.LOG_LEVEL, logging.INFO),
        format='%(levelname)s - %(name)s - %(message)s'
    )

    from console import ConsoleApp

    try:
        ConsoleApp(config).run()
    except (KeyboardInterrupt, EOFError):
        print("\n  Goodbye!")
    return 0


if __name__ == '__main__':
    raise SystemExit(main())

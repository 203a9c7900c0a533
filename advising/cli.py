import argparse
import json
import logging
import sys
from pathlib import Path

from advising.catalog import Catalog
from advising.files import resolve_filename
from advising.loader import load_courses
from advising.logger import setup_logging
from advising.paths import DATA_DIR, EXPECTED_BASE
from advising.render import catalog_frame, print_all, print_detail, render_detail

logger = logging.getLogger(__name__)

LOG_LEVELS = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]

MENU = """  1. Load Data Structure.
  2. Print Course List.
  3. Print Course.
  9. Exit"""


def read_choice(prompt):
    """Returns an int, None for non-numeric input, or raises EOFError."""
    raw = input(prompt)
    try:
        return int(raw.strip())
    except ValueError:
        return None


def ask_file(data_dir):
    name = input("Enter the file name to load (case-insensitive, with or without .csv): ")
    resolved = resolve_filename(name)
    if resolved is None:
        print(f'ERROR: The file name does not match "{EXPECTED_BASE}" (ignoring case).')
        print("Please re-check your spelling and try again.")
        return None
    print(f"Using file: {resolved}")
    return Path(data_dir) / resolved


def run_menu(data_dir=DATA_DIR, file=None):
    """Interactive loop. `file` skips the file-name prompt on option 1."""
    catalog = None

    print("Welcome to the course planner.\n")
    while True:
        print(MENU)
        try:
            choice = read_choice("\nWhat would you like to do? ")
        except EOFError:
            print()
            break

        if choice is None:
            print("Input is not a valid option.\n")
            continue

        if choice == 1:
            path = Path(file) if file else ask_file(data_dir)
            if path is None:
                continue
            fresh = Catalog()
            if load_courses(path, fresh) is None:
                print(f"ERROR: Could not open file: {path}")
                continue
            catalog = fresh
            print("Courses loaded into data structure.")
        elif choice == 2:
            if catalog is None:
                print("Please load courses before printing the list.")
                continue
            print("Here is the course schedule:\n")
            print_all(catalog)
            print()
        elif choice == 3:
            if catalog is None:
                print("Please load courses before searching for a course.")
                continue
            try:
                query = input("What course do you want to know about? ")
            except EOFError:
                print()
                break
            print_detail(catalog, query)
            print()
        elif choice == 9:
            print("Thank you for using the course planner!")
            break
        else:
            print(f"{choice} is not a valid option.\n")

    return 0


def run_batch(args):
    catalog = Catalog()
    result = load_courses(args.file, catalog)
    if result is None:
        print(f"ERROR: Could not open file: {args.file}", file=sys.stderr)
        return 2

    if args.export:
        catalog_frame(catalog).to_csv(args.export, index=False)
        logger.info("Wrote %s", args.export)

    if args.json:
        payload = {}
        if args.list:
            payload["courses"] = [c.to_dict() for c in catalog.enumerate()]
        if args.course:
            payload["details"] = {}
            for q in args.course:
                course = catalog.lookup(q)
                payload["details"][q] = course.to_dict() if course else None
        print(json.dumps(payload, indent=2))
        return 0

    if args.list:
        print_all(catalog)
    for i, q in enumerate(args.course):
        if args.list or i:
            print()
        for line in render_detail(catalog, q):
            print(line)
    return 0


def main(argv=None):
    parser = argparse.ArgumentParser(
        description="ABCU advising assistant: list courses and look up prerequisites."
    )
    parser.add_argument("--file", "-f", help="Course file to load (skips the file-name check).")
    parser.add_argument("--data-dir", default=str(DATA_DIR), help="Folder holding the course file.")
    parser.add_argument("--list", action="store_true", help="Print every course in order and exit.")
    parser.add_argument("--course", "-c", action="append", default=[],
                        help="Print details for a course (repeatable). e.g., -c CSCI300 -c math201")
    parser.add_argument("--json", action="store_true", help="Output JSON instead of text (with --list/--course).")
    parser.add_argument("--export", help="Write the loaded catalog as CSV to this path.")
    parser.add_argument("--log-level", type=str.upper, choices=LOG_LEVELS, help="Logging level (any case).")
    args = parser.parse_args(argv)

    setup_logging(args.log_level)

    if args.list or args.course or args.export:
        if not args.file:
            args.file = str(Path(args.data_dir) / f"{EXPECTED_BASE}.csv")
        return run_batch(args)

    return run_menu(data_dir=args.data_dir, file=args.file)


if __name__ == "__main__":
    raise SystemExit(main())

"""
Student Analysis Script

Lists the faculties found in a students XML document and prints the names
of students matching the given faculty/department filters.

Usage:
    python analyze_students.py data/students.xml
    python analyze_students.py data/students.xml --faculty Eng --department CS
    python analyze_students.py data/students.xml --strategy stream

Filters follow the form semantics: a faculty of 'All' and blank values
mean "no constraint". Settings (record/name tags, missing-name policy)
come from config/analysis.yaml, STUDENT_ANALYSIS_* variables or .env.
"""

import argparse
import logging
import sys
from datetime import datetime

from dotenv import load_dotenv

from student_analysis import StudentAnalyzer, available_strategies
from student_analysis.config import get_settings
from student_analysis.exceptions import StudentAnalysisError


def main(argv=None) -> int:
    parser = argparse.ArgumentParser(description="Filter student names from an XML document")
    parser.add_argument("xml_path", help="Path to the students XML document")
    parser.add_argument("--faculty", default=None, help="Faculty to keep ('All' for any)")
    parser.add_argument("--department", default=None, help="Department to keep")
    parser.add_argument(
        "--strategy",
        default=None,
        help=f"Traversal strategy: {', '.join(available_strategies())} (or dom/sax/linq)"
    )
    parser.add_argument("--verbose", action="store_true", help="Enable debug logging")
    args = parser.parse_args(argv)

    load_dotenv()
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s"
    )

    print("=" * 80)
    print("STUDENT ANALYSIS")
    print("=" * 80)

    # === Step 1: Load Configuration ===
    print("\n[Step 1] Loading configuration...")
    settings = get_settings()
    print(f"  ✓ Config loaded")
    print(f"    - Record path: {settings.record_path}")
    print(f"    - Missing names: {settings.missing_name}")
    print(f"    - Strategy: {args.strategy or settings.default_strategy}")

    analyzer = StudentAnalyzer(settings=settings)

    # === Step 2: List Faculties ===
    print(f"\n[Step 2] Reading faculties from {args.xml_path}...")
    try:
        faculties = analyzer.faculties(args.xml_path)
    except (StudentAnalysisError, OSError) as e:
        print(f"  ✗ Failed to read document!")
        print(f"    Error: {e}")
        return 1
    print(f"  ✓ {len(faculties)} faculties: {', '.join(faculties) or '(none)'}")

    # === Step 3: Run Analysis ===
    print("\n[Step 3] Filtering students...")
    print(f"  Faculty: {args.faculty or 'All'}")
    print(f"  Department: {args.department or '(any)'}")

    start_time = datetime.now()
    try:
        names = analyzer.analyze(
            args.xml_path,
            faculty=args.faculty,
            department=args.department,
            strategy=args.strategy
        )
    except (StudentAnalysisError, OSError) as e:
        print(f"  ✗ Analysis failed!")
        print(f"    Error: {e}")
        return 1
    elapsed = (datetime.now() - start_time).total_seconds()

    # === Step 4: Display Results ===
    print("\n" + "=" * 80)
    print(f"RESULTS: {len(names)} students ({elapsed:.3f} seconds)")
    print("=" * 80)
    for name in names:
        print(f"  {name}")
    print()

    return 0


if __name__ == "__main__":
    sys.exit(main())

"""
Validate a movie CSV file without starting the interactive menu.

This script:
1) Loads the file with the chosen validation policy
2) Reports every skipped row with its line number and reason
3) Summarizes skips per reason and the best movie per year

Usage:
    python -m scripts.check_movies movies_sample_1.csv [strict|lenient]

Exits with status 1 if the file cannot be read.
"""

import sys  # argv and exit status
from collections import Counter  # skip totals per reason

from loguru import logger  # console logging

from movie_records.aggregator import best_per_year  # per-year summary
from movie_records.config import policy_by_name  # validation presets
from movie_records.data_loader import DataLoader  # data ingestion
from movie_records.errors import MovieRecordsError  # fatal failures


def main(argv=None) -> int:
	argv = sys.argv[1:] if argv is None else argv
	if not argv:
		logger.error("Usage: python -m scripts.check_movies <CSV_FILE> [strict|lenient]")
		return 1

	# Headline banner for visibility in console
	logger.info("=" * 60)
	logger.info("Check Movie File")
	logger.info("=" * 60)

	try:
		policy = policy_by_name(argv[1] if len(argv) > 1 else "strict")
		# 1) Load data
		logger.info(f"[1/3] Loading {argv[0]} with policy '{policy.name}'...")
		movies, notices = DataLoader(policy).load(argv[0])
	except MovieRecordsError as e:
		logger.error(str(e))
		return 1
	logger.info(f"[OK] Kept {len(movies)} movies, skipped {len(notices)} rows")

	# 2) Skip totals
	logger.info("[2/3] Skipped rows by reason:")
	for reason, count in Counter(n.reason for n in notices).most_common():
		logger.info(f"  {reason.value}: {count}")

	# 3) Best per year
	logger.info("[3/3] Highest rated movie per year:")
	for year, rating, title in best_per_year(movies):
		logger.info(f"  {year} {rating:.1f} {title}")

	logger.info("=" * 60)
	return 0


if __name__ == '__main__':
	sys.exit(main())  # invoke checker

"""
Model prefetch - download league models ahead of first use.

Useful at service start-up to warm the shared cache, or from the command
line to check that every configured model is reachable and decodes.
"""
import argparse
import asyncio
from typing import Dict, Iterable, List, Optional

from model_fetcher.core.config import settings
from model_fetcher.core.logging import get_logger, setup_logging
from model_fetcher.model_client import ModelFetcher, ModelFetchError, get_model_fetcher

logger = get_logger("prefetch")


async def prefetch(
    league_codes: Iterable[str],
    fetcher: Optional[ModelFetcher] = None,
) -> Dict[str, bool]:
    """
    Fetch several league models concurrently.

    Args:
        league_codes: League codes to download
        fetcher: Fetcher whose cache is warmed (default: shared fetcher)

    Returns:
        Mapping league code -> whether the model is now cached
    """
    fetcher = fetcher or get_model_fetcher()
    codes = list(dict.fromkeys(league_codes))

    results = await asyncio.gather(
        *(fetcher.get_model_data(code) for code in codes),
        return_exceptions=True,
    )

    status: Dict[str, bool] = {}
    for code, result in zip(codes, results):
        if isinstance(result, ModelFetchError):
            logger.error(f"✗ Failed to prefetch {code}: {result}")
            status[code] = False
        elif isinstance(result, BaseException):
            raise result
        else:
            logger.info(f"✓ Prefetched {code} ({len(result)} bytes)")
            status[code] = True
    return status


def _parse_args(argv: Optional[List[str]]) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Download and decode league models.")
    parser.add_argument(
        "--league",
        action="append",
        dest="leagues",
        help="League code to fetch (repeatable, default from LEAGUE_CODES)",
    )
    parser.add_argument("--url-template", default=None, help="Override the model URL template")
    return parser.parse_args(argv)


async def _run(league_codes: List[str], url_template: Optional[str]) -> Dict[str, bool]:
    async with ModelFetcher(url_template=url_template) as fetcher:
        return await prefetch(league_codes, fetcher)


def main(argv: Optional[List[str]] = None) -> int:
    """Main prefetch function."""
    setup_logging(settings.log_level)
    args = _parse_args(argv)
    league_codes = args.leagues or settings.league_code_list()

    logger.info("=" * 60)
    logger.info(f"Starting model prefetch for {len(league_codes)} leagues")
    logger.info("=" * 60)

    status = asyncio.run(_run(league_codes, args.url_template))
    success_count = sum(status.values())

    logger.info("=" * 60)
    logger.info(f"Prefetch complete: {success_count}/{len(status)} models ready")
    logger.info("=" * 60)

    return 0 if success_count == len(status) else 1

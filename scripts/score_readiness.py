from __future__ import annotations
import argparse
import logging
import sys
from pathlib import Path
from typing import Dict, List, Optional
ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))
from automation_readiness.config import settings
from automation_readiness.scoring import NO_BLOCKERS_MESSAGE, ReadinessEvaluator, profile_from_settings
from automation_readiness.services.export import to_json, write_csv
from automation_readiness.services.input_store import InputStore, resolve_inputs
from automation_readiness.services.share_link import build_share_url, decode_query
from automation_readiness.services.validation import InputValidationError, validate_inputs

logger = logging.getLogger("automation_readiness")

# flag -> input field
INPUT_FLAGS: Dict[str, str] = {
    "--process-volume": "process_volume",
    "--variance": "variance",
    "--exception-rate": "exception_rate",
    "--data-quality": "data_quality",
    "--system-access": "system_access",
    "--compliance-sensitivity": "compliance_sensitivity",
}


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Score a process for automation readiness.")
    for flag, field in INPUT_FLAGS.items():
        parser.add_argument(flag, dest=field, default=None)
    parser.add_argument("--query", default=None, help="share-link query, e.g. 'pv=1000&v=20'")
    parser.add_argument("--use-store", action="store_true", help="start from the last saved inputs")
    parser.add_argument("--save", action="store_true", help="save the resolved inputs")
    parser.add_argument("--reset", action="store_true", help="clear saved inputs and use defaults")
    parser.add_argument("--json", action="store_true", help="print a JSON snapshot instead of text")
    parser.add_argument("--csv", nargs="?", const=settings.csv_filename, default=None, help="also write a CSV snapshot")
    parser.add_argument("--share-base", nargs="?", const=settings.share_base_url, default=None, help="print a share link")
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    logging.basicConfig(level=settings.log_level)

    store = InputStore(settings.storage_dir, settings.storage_key)
    if args.reset:
        store.clear()

    flags = {field: getattr(args, field) for field in INPUT_FLAGS.values() if getattr(args, field) is not None}
    try:
        overrides = validate_inputs(flags)
    except InputValidationError as exc:
        for r in exc.results:
            print(f"error: {r.field}: {r.message}", file=sys.stderr)
        return 2

    stored = store.load() if (args.use_store and not args.reset) else None
    query = decode_query(args.query) if args.query else None
    inputs = resolve_inputs(stored=stored, query=query, overrides=overrides)

    result = ReadinessEvaluator(profile_from_settings(settings)).evaluate(inputs)
    logger.info("readiness_scored score=%s band=%s blockers=%s", result.readiness_score, result.band, len(result.top_blockers))

    if args.save:
        store.save(inputs)

    if args.json:
        print(to_json(inputs, result))
    else:
        print("\n==== READINESS ====")
        print(f"score:     {result.readiness_score}")
        print(f"band:      {result.band}")
        print(f"narrative: {result.narrative}")
        print("\n---- Top blockers ----")
        if not result.top_blockers:
            print(NO_BLOCKERS_MESSAGE)
        for b in result.top_blockers:
            print(f"- {b.reason} (gap {b.gap:.1f}): {b.hint}")

    if args.csv:
        path = write_csv(Path(args.csv), inputs, result)
        print(f"csv: {path}", file=sys.stderr)

    if args.share_base:
        print(f"share: {build_share_url(args.share_base, inputs)}", file=sys.stderr)

    return 0


if __name__ == "__main__":
    raise SystemExit(main())

import json
import logging
import sys
from pathlib import Path
from typing import TextIO

from logdrain import ParseError, config, parse
from logdrain.events import content_hash, to_event

logger = logging.getLogger(__name__)


def parse_lines(lines, source: str, out: TextIO) -> tuple[int, int, int]:
    """
    Parse already-split drain lines and write one JSON event per line to `out`.
    Entries the drain delivered more than once are written only the first time.
    Returns (parsed, failed, duplicates).
    """
    parsed = failed = duplicates = 0
    seen: set[str] = set()
    for i, line in enumerate(lines, start=1):
        line = line.rstrip("\r\n")
        if not line:
            continue
        try:
            entry = parse(line.encode("utf-8"))
        except ParseError as e:
            failed += 1
            logger.warning("%s:%d: %s", source, i, e)
            continue
        ev = to_event(entry, source_path=source, line_number=i, raw=line)
        ev["content_hash"] = content_hash(ev)
        if ev["content_hash"] in seen:
            duplicates += 1
            logger.debug("%s:%d: duplicate of an earlier entry, skipped", source, i)
            continue
        seen.add(ev["content_hash"])
        out.write(json.dumps(ev, ensure_ascii=False) + "\n")
        parsed += 1

    logger.info(
        "Parsed %d lines from %s (%d failed, %d duplicates)", parsed, source, failed, duplicates
    )
    return parsed, failed, duplicates


def main(argv: list[str] | None = None) -> int:
    argv = sys.argv[1:] if argv is None else argv
    if len(argv) > 1:
        print("Usage: python scripts/parse_drain.py [FILE]", file=sys.stderr)
        return 2

    if argv:
        path = Path(argv[0])
        with path.open("r", encoding="utf-8", errors="replace") as f:
            _, failed, _ = parse_lines(f, path.name, sys.stdout)
    else:
        _, failed, _ = parse_lines(sys.stdin, "<stdin>", sys.stdout)
    return 1 if failed else 0


if __name__ == "__main__":
    logging.basicConfig(
        level=config.LOG_LEVEL,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    )
    sys.exit(main())

import json
import logging
import sys
from pathlib import Path

from .core import process_directory
from .detect import load_cascade

logger = logging.getLogger(__name__)

USAGE = "Usage: facescan <directory_path> [--save <save_directory>] [--json <file>] [--debug]"


def _parse(argv):
    opts = {"input": None, "save": None, "json": None, "debug": False}
    args = list(argv[1:])
    while args:
        a = args.pop(0)
        if a in ("--save", "--json"):
            if not args:
                what = "Save directory" if a == "--save" else "JSON file"
                raise ValueError(f"Error: {what} not specified.")
            opts[a[2:]] = args.pop(0)
        elif a == "--debug":
            opts["debug"] = True
        elif a.startswith("--"):
            raise ValueError(f"Error: unknown option {a}")
        elif opts["input"] is None:
            opts["input"] = a
        else:
            raise ValueError(f"Error: unexpected argument {a}")
    if opts["input"] is None:
        raise ValueError(USAGE)
    return opts


def main(argv=None) -> int:
    argv = sys.argv if argv is None else argv

    try:
        opts = _parse(argv)
    except ValueError as e:
        print(e, file=sys.stderr)
        if str(e) != USAGE:
            print(USAGE, file=sys.stderr)
        return 2

    logging.basicConfig(
        level=logging.DEBUG if opts["debug"] else logging.INFO,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )

    in_dir = Path(opts["input"])
    if not in_dir.is_dir():
        logger.error("The provided path is not a valid directory: %s", in_dir)
        return 1

    try:
        cascade = load_cascade()
    except (FileNotFoundError, RuntimeError) as e:
        logger.error("%s", e)
        return 1

    save_dir = Path(opts["save"]) if opts["save"] else None
    results = process_directory(
        in_dir, cascade,
        save_dir=save_dir,
        show=save_dir is None,
        debug=opts["debug"],
    )

    if opts["json"]:
        json_path = Path(opts["json"])
        try:
            json_path.parent.mkdir(parents=True, exist_ok=True)
            with open(json_path, "w", encoding="utf-8") as f:
                json.dump({"images": [r.as_dict() for r in results]}, f, ensure_ascii=False, indent=2)
        except OSError as e:
            logger.error("Failed to write JSON to %s: %s", json_path, e)
            return 1
        logger.info("Wrote JSON to: %s", json_path)

    logger.info("Processing completed.")
    return 0


if __name__ == "__main__":
    sys.exit(main())

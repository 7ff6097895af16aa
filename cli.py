import sys, os
import argparse, datetime, logging
# Ensure relative imports work regardless of run location
project_root = os.path.dirname(os.path.abspath(__file__))
sys.path.insert(0, project_root)

from resume_text.utils import read_config, config_value, ensure_dir, write_log
from resume_text.normalize import normalize

logger = logging.getLogger("cli")

DEFAULT_LOG_FILE = "data/output/log.txt"


def read_payloads(paths):
    """Read each file as bytes; unreadable files become absent slots."""
    payloads = []
    for p in paths:
        try:
            with open(p, "rb") as f:
                payloads.append(f.read())
        except OSError as e:
            logger.warning("Could not read %s: %s", p, e)
            payloads.append(None)
    return payloads


def cmd_normalize(args):
    cfg = read_config(args.config)
    workers = args.workers or int(config_value(cfg, "extraction.max_workers", 1))
    log_file = config_value(cfg, "paths.log_file", DEFAULT_LOG_FILE)

    texts = normalize(read_payloads(args.files), max_workers=workers)

    if args.out_dir:
        ensure_dir(args.out_dir)
        for path, text in zip(args.files, texts):
            stem = os.path.splitext(os.path.basename(path))[0]
            out_path = os.path.join(args.out_dir, f"{stem}.txt")
            with open(out_path, "w", encoding="utf-8") as f:
                f.write(text + "\n")
            print(f" - {out_path}")
    else:
        for path, text in zip(args.files, texts):
            print(f"\n=== {os.path.basename(path)} ===")
            print(text if text else "(no text extracted)")

    empty = sum(1 for t in texts if not t)
    write_log(log_file, f"{datetime.datetime.now().isoformat()} | normalized {len(texts)} documents | empty: {empty}")
    return 0


def main(argv=None):
    ap = argparse.ArgumentParser(description="Resume text normalizer")
    ap.add_argument("--config", default="config.yaml")
    ap.add_argument("--log-level", default="WARNING")
    sub = ap.add_subparsers(dest="cmd")

    nm = sub.add_parser("normalize", help="Extract → clean → print or save normalized resume text")
    nm.set_defaults(func=cmd_normalize)
    nm.add_argument("files", nargs="+", help="Resume files (PDF/DOCX/TXT)")
    nm.add_argument("--out-dir", default=None, help="Write <name>.txt files here instead of printing")
    nm.add_argument("--workers", type=int, default=None, help="Worker threads (default: config extraction.max_workers)")

    args = ap.parse_args(argv)
    logging.basicConfig(level=args.log_level.upper(), format="%(levelname)s %(name)s: %(message)s")
    if not args.cmd:
        ap.print_help()
        sys.exit(1)
    return args.func(args)


if __name__ == "__main__":
    main()

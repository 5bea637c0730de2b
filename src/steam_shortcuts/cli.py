from __future__ import annotations
import argparse, json, logging, sys
from .binary.codecs.bytecursor import DecodeError
from .binary.codecs.kv_codec import DEFAULT_ENCODING, DEFAULT_MAX_DEPTH
from .binary.codecs.shortcut_codec import ParseError
from .models.file import ShortcutsFile

def _opts(args) -> dict:
    return {"max_depth": args.max_depth, "encoding": args.encoding}

def cmd_info(args):
    # Fast path: count entries without projecting them
    if args.summary:
        from .binary.reader import summarize_file
        print(f"shortcuts={summarize_file(args.input, **_opts(args))}")
        return 0

    from .binary.reader import iter_shortcuts
    out = [
        sc.model_dump(mode="json")
        for sc in iter_shortcuts(args.input, max_shortcuts=args.sample, **_opts(args))
    ]
    print(json.dumps(out, indent=2))
    if not out:
        print("Warning: no shortcuts found in the file", file=sys.stderr)
    return 0

def cmd_to_json(args):
    f = ShortcutsFile.from_binary(args.input, **_opts(args))
    with open(args.output, "w", encoding="utf-8") as out:
        json.dump(f.model_dump(mode="json"), out, indent=2)
    return 0

def build_parser():
    p = argparse.ArgumentParser(prog="steam-shortcuts", description="Steam shortcuts.vdf reader")
    p.add_argument("-v", "--verbose", action="store_true", help="Log every decoded entry (DEBUG)")
    p.add_argument("--max-depth", type=int, default=DEFAULT_MAX_DEPTH, help="Maximum object nesting depth")
    p.add_argument("--encoding", default=DEFAULT_ENCODING, help="Text encoding of keys and strings")
    sub = p.add_subparsers(dest="cmd", required=True)

    sp = sub.add_parser("info", help="print shortcuts as JSON or a fast count")
    sp.add_argument("input", help="Path to shortcuts.vdf")
    sp.add_argument("--summary", action="store_true", help="Only count entries, no projection")
    sp.add_argument("--sample", type=int, default=None, help="Decode only the first N shortcuts")
    sp.set_defaults(func=cmd_info)

    sp = sub.add_parser("to-json", help="convert shortcuts.vdf to JSON")
    sp.add_argument("input")
    sp.add_argument("output")
    sp.set_defaults(func=cmd_to_json)

    return p

def main(argv=None):
    p = build_parser()
    ns = p.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if ns.verbose else logging.WARNING,
        format="%(asctime)s - %(levelname)s - %(message)s",
    )

    try:
        return ns.func(ns)
    except (DecodeError, ParseError, OSError) as e:
        print(f"error: {e}", file=sys.stderr)
        return 1


if __name__ == "__main__":
    raise SystemExit(main())

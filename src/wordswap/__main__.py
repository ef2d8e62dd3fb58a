from __future__ import annotations
import argparse, json, logging, os, sys
from . import Engine
from . import config as CFG
from .models import EditResult

HELP = """Commands:
  :select N <content>   replace word at token index N
  :delete N             delete word at token index N
  :undo / :redo
  :tokens               show token indices
  :reset <text>         start over
  anything else         dictation (appended)
  empty line            quit"""


def _supports_color() -> bool:
    return sys.stdout.isatty() and os.environ.get("NO_COLOR", "") == ""

CSI = "\033["
def _c(text: str, code: str) -> str:
    if not _supports_color(): return text
    return f"{CSI}{code}m{text}{CSI}0m"

def _print_tokens(eng: Engine) -> None:
    for t in eng.tokens:
        if not t.is_whitespace:
            print(f"{t.original_index:<3} {t.text}")

def _print_result(eng: Engine, res: EditResult, as_json: bool) -> None:
    if as_json:
        print(json.dumps({**res.to_dict(), "view": eng.view().to_dict()}, ensure_ascii=False))
        return
    color = "2;36" if res.changed else "2;33"
    rule = f" [{res.rule}]" if res.rule else ""
    print(_c(f"({res.message}){rule}", color))
    print(eng.text)

def _parse_index(raw: str) -> int:
    # -1 never names a token, so a typo ends up as TARGET_NOT_FOUND
    try:
        return int(raw)
    except ValueError:
        return -1

def run_command(eng: Engine, line: str) -> EditResult | None:
    """Dispatch one REPL line. Returns None for commands that don't edit."""
    cmd, _, rest = line.strip().partition(" ")
    cmd = cmd.lower()
    if cmd == ":undo":
        return eng.undo()
    if cmd == ":redo":
        return eng.redo()
    if cmd == ":reset":
        eng.reset(rest.strip())
        return None
    if cmd == ":delete":
        return eng.delete(_parse_index(rest.strip()))
    if cmd == ":select":
        idx, _, content = rest.strip().partition(" ")
        return eng.edit(_parse_index(idx), content)
    return eng.edit(None, line)

def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Word replacement REPL")
    src = parser.add_mutually_exclusive_group()
    src.add_argument("--text", default=None, help="Initial document text")
    src.add_argument("--file", default=None, help="Read initial text from a file")
    parser.add_argument("--json", action="store_true", help="Emit JSON per edit")
    parser.add_argument("--verbose", action="store_true")
    args = parser.parse_args(argv)

    if args.verbose:
        logging.basicConfig(level=logging.INFO)
        os.environ["WORDSWAP_VERBOSE"] = "1"

    if args.file:
        with open(args.file, encoding="utf-8") as f:
            text = f.read().strip()
    else:
        text = args.text if args.text is not None else CFG.DEFAULT_TEXT

    eng = Engine(text)
    print(eng.text)
    print(_c(HELP, "2;37"))

    while True:
        try:
            raw = input("> ")
        except (EOFError, KeyboardInterrupt):
            print(); break
        if raw.strip() == "":
            break
        if raw.strip().lower() == ":tokens":
            _print_tokens(eng); continue
        res = run_command(eng, raw)
        if res is None:
            print(eng.text); continue
        _print_result(eng, res, args.json)
    return 0

if __name__ == "__main__":
    sys.exit(main())

from __future__ import annotations
import argparse, json, sys
from . import Engine
from . import config as CFG

def main(argv: list[str] | None = None) -> int:
    p = argparse.ArgumentParser(description="Sentence anagrams CLI (Engine-backed)")
    p.add_argument("sentence", nargs="*", help="Words of the sentence to anagram")
    p.add_argument("--dictionary", default=None, help="Word list, one word per line (default: bundled list)")
    p.add_argument("--cache", default=None, help="Pickle path for the index (written on build, read with --load)")
    p.add_argument("--load", action="store_true", help="Load the index from --cache instead of building it")
    p.add_argument("--word", default=None, help="Print the dictionary anagrams of a single word")
    p.add_argument("-n", "--limit", type=int, default=CFG.DEFAULT_LIMIT, help="Max sentences to print")
    p.add_argument("--max-letters", type=int, default=None, help="Refuse longer sentences")
    p.add_argument("--repl", action="store_true", help="Interactive loop after init")
    p.add_argument("--json", action="store_true", help="Emit JSON rows")
    p.add_argument("--verbose", action="store_true")

    args = p.parse_args(argv)
    if args.load and not args.cache:
        p.error("--load requires --cache")
    if not (args.sentence or args.word or args.repl):
        p.error("nothing to do: give a sentence, --word or --repl")
    if not 0 <= args.limit <= CFG.MAX_LIMIT:
        p.error(f"--limit must be between 0 and {CFG.MAX_LIMIT}")

    eng = Engine()
    try:
        if args.load:
            eng.load(cache=args.cache, verbose=args.verbose)
            if args.max_letters is not None:
                eng.max_letters = args.max_letters
        else:
            eng.build(path=args.dictionary, cache=args.cache,
                      max_letters=args.max_letters, verbose=args.verbose)

        def run_word(w: str):
            words = eng.word_anagrams(w)
            if args.json:
                print(json.dumps(words, ensure_ascii=False))
            elif not words:
                print("(no anagrams)")
            else:
                print(" ".join(words))

        def run_sentence(words: list[str]) -> bool:
            try:
                rows = eng.sentence_anagrams(words, limit=args.limit)
            except ValueError as e:
                print(f"error: {e}", file=sys.stderr)
                return False
            if args.json:
                print(json.dumps([r.to_dict() for r in rows], ensure_ascii=False, indent=2))
            elif not rows:
                print("(no anagrams)")
            else:
                for i, r in enumerate(rows, 1):
                    print(f"{i:<4} {r.text}")
            return True

        ok = True
        if args.word:
            run_word(args.word)
        if args.sentence:
            ok = run_sentence(args.sentence)

        if args.repl:
            print("Type a sentence (empty line to exit).")
            while True:
                try:
                    line = input("> ").strip()
                except (EOFError, KeyboardInterrupt):
                    break
                if not line:
                    break
                run_sentence(line.split())

        return 0 if ok else 1
    finally:
        eng.shutdown()

if __name__ == "__main__":
    raise SystemExit(main())

from __future__ import annotations
import argparse
from flask import Flask, request, jsonify, Response
from anagrams.engine import Engine
from anagrams.config import DEFAULT_LIMIT, MAX_LIMIT

app = Flask(__name__)
_engine: Engine | None = None

def _get_engine() -> Engine:
    if _engine is None or _engine.index is None:
        raise RuntimeError("Engine not initialized. Start the server with main() or set _engine.")
    return _engine

@app.errorhandler(ValueError)
def _bad_request(e: ValueError):
    return jsonify({"error": str(e)}), 400

# ---------- API ----------
@app.get("/api/anagrams")
def api_anagrams():
    q = request.args.get("q", "", type=str)
    limit = request.args.get("limit", DEFAULT_LIMIT, type=int)
    if not 0 <= limit <= MAX_LIMIT:
        raise ValueError(f"limit must be between 0 and {MAX_LIMIT}")
    words = q.split()
    if not words:
        return jsonify([])
    rows = _get_engine().sentence_anagrams(words, limit=limit)
    return jsonify([r.to_dict() for r in rows])

@app.get("/api/words")
def api_words():
    w = request.args.get("w", "", type=str).strip()
    if not w:
        return jsonify([])
    return jsonify(_get_engine().word_anagrams(w))

@app.get("/health")
def health():
    eng = _get_engine()
    return jsonify({"ok": True, "words": eng.index.word_count, "multisets": len(eng.index)})

# ---------- UI ----------
@app.get("/")
def home():
    html = r"""
<!doctype html>
<html lang="en">
<head>
<meta charset="utf-8" />
<meta name="viewport" content="width=device-width,initial-scale=1" />
<title>Sentence Anagrams • Flask UI</title>
<style>
body{ margin:24px auto; max-width:720px; padding:0 16px;
  background:#0b0f14; color:#cfd8e3; font:16px/1.45 system-ui,Segoe UI,Roboto,Arial }
input{ width:100%; padding:10px 12px; border-radius:10px; border:1px solid #1c2530;
  background:#0b1117; color:#cfd8e3; font-size:16px }
li{ padding:4px 0; border-top:1px solid #1c2530 }
.muted{ color:#8a94a6; font-size:13px }
</style>
</head>
<body>
  <h1>Sentence anagrams</h1>
  <form id="f"><input id="q" type="text" placeholder="Type a sentence and press Enter" autocomplete="off" autofocus /></form>
  <div id="stats" class="muted">Ready.</div>
  <ol id="out"></ol>
<script>
const q = document.querySelector("#q"), out = document.querySelector("#out"), stats = document.querySelector("#stats");
document.querySelector("#f").addEventListener("submit", async (ev)=>{
  ev.preventDefault();
  out.innerHTML = "";
  const resp = await fetch(`/api/anagrams?q=${encodeURIComponent(q.value)}`);
  const data = await resp.json();
  if(!resp.ok){ stats.textContent = `Error: ${data.error ?? resp.status}`; return; }
  stats.textContent = `Results: ${data.length}`;
  for(const r of data){
    const li = document.createElement("li");
    li.textContent = r.text;
    out.appendChild(li);
  }
});
</script>
</body>
</html>
"""
    return Response(html, mimetype="text/html")

def main(argv=None) -> int:
    ap = argparse.ArgumentParser(description="Run Flask UI on top of Engine")
    mode = ap.add_mutually_exclusive_group()
    mode.add_argument("--build", action="store_true", help="Build from --dictionary (default)")
    mode.add_argument("--load", action="store_true", help="Load the index from --cache")
    ap.add_argument("--dictionary", default=None)
    ap.add_argument("--cache", default=None)
    ap.add_argument("--max-letters", type=int, default=None)
    ap.add_argument("--host", default="127.0.0.1")
    ap.add_argument("--port", type=int, default=8000)
    ap.add_argument("--verbose", action="store_true")
    args = ap.parse_args(argv)

    global _engine
    _engine = Engine()
    if args.load:
        if not args.cache:
            ap.error("--load requires --cache")
        _engine.load(cache=args.cache, verbose=args.verbose)
        if args.max_letters is not None:
            _engine.max_letters = args.max_letters
    else:
        _engine.build(path=args.dictionary, cache=args.cache,
                      max_letters=args.max_letters, verbose=args.verbose)

    try:
        app.run(host=args.host, port=args.port, debug=args.verbose)
    finally:
        _engine.shutdown()
    return 0

if __name__ == "__main__":
    raise SystemExit(main())

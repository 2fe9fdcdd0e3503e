from __future__ import annotations
import argparse
from dataclasses import asdict

from flask import Flask, Response, jsonify, request

from restorer.config import MAX_TEXT_LENGTH, MIN_TEXT_LENGTH, NO_SOLUTION_MESSAGE
from restorer.engine import Engine, InvalidInputError

app = Flask(__name__)
_engine: Engine | None = None

# ---------- API ----------
@app.get("/api/restore")
def api_restore():
    q = request.args.get("q", "", type=str)
    if _engine is None or _engine.lexicon is None:
        return jsonify({"error": "engine not loaded"}), 503
    try:
        res = _engine.restore(q)
    except InvalidInputError as e:
        return jsonify({"error": str(e)}), 400
    body = asdict(res)
    if res.restored is None:
        body["message"] = NO_SOLUTION_MESSAGE
    return jsonify(body)

@app.get("/health")
def health():
    lex = _engine.lexicon if _engine is not None else None
    if lex is None:
        return jsonify({"ok": False, "words": 0, "bigrams": 0}), 503
    return jsonify({"ok": True, "words": len(lex), "bigrams": lex.bigram_count()})

# ---------- UI ----------
@app.get("/")
def home():
    # Single page: inline CSS + minimal JS, no external deps.
    html = r"""
<!doctype html>
<html lang="en">
<head>
<meta charset="utf-8" />
<meta name="viewport" content="width=device-width,initial-scale=1" />
<title>Text Restorer • Flask UI</title>
<style>
:root{
  --bg:#0b0f14; --panel:#0f141b; --ink:#cfd8e3; --muted:#8a94a6;
  --accent:#6ee7ff; --border:#1c2530; --danger:#ff5d5d; --ok:#45d483;
}
*{box-sizing:border-box}
body{
  margin:0; background:var(--bg); color:var(--ink);
  font:16px/1.45 system-ui,-apple-system,Segoe UI,Roboto,Ubuntu,"Helvetica Neue",Arial;
}
.container{ max-width:860px; margin:24px auto; padding:0 16px }
.card{
  background:var(--panel); border:1px solid var(--border);
  border-radius:16px; padding:18px; box-shadow:0 10px 30px rgba(0,0,0,.25);
}
h1{ font-size:20px; margin:0 0 8px 0; letter-spacing:.3px }
form{ display:flex; gap:12px; margin:12px 0 4px 0 }
input{
  flex:1; padding:12px 14px; border-radius:12px; border:1px solid var(--border);
  background:#0b1117; color:var(--ink); outline:none; font-size:16px;
}
input:focus{ border-color:var(--accent) }
button{
  padding:10px 14px; border-radius:10px; border:1px solid var(--border);
  background:#0b1117; color:var(--ink); cursor:pointer;
}
.meta{ color:var(--muted); font-size:13px; margin-top:6px }
.out{ margin-top:16px; padding:14px; border-radius:12px; border:1px solid var(--border); min-height:3rem }
.ok{ color:var(--ok) } .err{ color:var(--danger) }
.mono{ font-family: ui-monospace, SFMono-Regular, Menlo, Monaco, Consolas, monospace }
footer{ margin:26px 0 6px 0; color:var(--muted); font-size:12px; text-align:center }
</style>
</head>
<body>
  <div class="container">
    <div class="card">
      <h1>Text Restorer</h1>
      <form id="f" autocomplete="off">
        <input id="q" type="text" placeholder="Damaged text, e.g. h*llo wrdol" maxlength="__MAX__" autofocus />
        <button type="submit">Restore</button>
      </form>
      <div class="meta">Use <span class="mono">*</span> for unknown letters. __MIN__-__MAX__ characters.</div>
      <div id="out" class="out">Enter some text to restore.</div>
    </div>
    <footer>Built with Flask • No external JS/CSS deps</footer>
  </div>
<script>
const q = document.querySelector("#q"), out = document.querySelector("#out");
document.querySelector("#f").addEventListener("submit", async (ev)=>{
  ev.preventDefault();
  const t0 = performance.now();
  try{
    const resp = await fetch(`/api/restore?q=${encodeURIComponent(q.value)}`);
    const data = await resp.json();
    const dt = Math.max(1, Math.round(performance.now() - t0));
    if(!resp.ok){ out.className = "out err"; out.textContent = data.error || `HTTP ${resp.status}`; return; }
    if(data.restored === null){ out.className = "out err"; out.textContent = data.message; return; }
    out.className = "out ok";
    out.textContent = `${data.restored}  (score ${data.score}, ~${dt} ms)`;
  }catch(e){
    out.className = "out err"; out.textContent = String(e);
  }
});
</script>
</body>
</html>
"""
    html = html.replace("__MIN__", str(MIN_TEXT_LENGTH)).replace("__MAX__", str(MAX_TEXT_LENGTH))
    return Response(html, mimetype="text/html")


def main(argv: list[str] | None = None) -> int:
    global _engine
    p = argparse.ArgumentParser(description="Text restorer web UI")
    p.add_argument("--dictionary", default=None)
    p.add_argument("--bigrams", default=None)
    p.add_argument("--squash", action="store_true")
    p.add_argument("--host", default="127.0.0.1")
    p.add_argument("--port", type=int, default=8000)
    p.add_argument("--verbose", action="store_true")
    args = p.parse_args(argv)

    _engine = Engine(squash=args.squash or None)
    _engine.load(dictionary=args.dictionary, bigrams=args.bigrams, verbose=args.verbose)
    try:
        app.run(host=args.host, port=args.port, debug=args.verbose)
    finally:
        _engine.shutdown()
    return 0

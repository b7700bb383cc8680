from __future__ import annotations
import logging
from flask import Flask, request, jsonify, Response
from livegrep.engine import Engine

log = logging.getLogger(__name__)

app = Flask(__name__)
_engine: Engine | None = None
_case_insensitive: bool = False

DEFAULT_WIDTH = 120
MAX_WIDTH = 1000


# ---------- API ----------
@app.get("/api/search")
def api_search():
    if _engine is None:
        return jsonify({"error": "engine not initialized"}), 503
    q = request.args.get("q", "", type=str)
    width = request.args.get("width", DEFAULT_WIDTH, type=int)
    width = max(0, min(width, MAX_WIDTH))
    insensitive = request.args.get("i", None, type=str)
    ci = _case_insensitive if insensitive is None else insensitive.lower() in ("1", "true", "yes")
    rows = _engine.search(q, case_insensitive=ci, width=width)
    return jsonify([r.to_dict() for r in rows])


@app.get("/api/health")
def api_health():
    files = len(_engine.files) if _engine is not None else 0
    return jsonify({"ok": _engine is not None, "files": files})


# ---------- UI ----------
@app.get("/")
def home():
    # Single page: input box, live results, highlighting from server ranges.
    html = r"""
<!doctype html>
<html lang="en">
<head>
<meta charset="utf-8" />
<meta name="viewport" content="width=device-width,initial-scale=1" />
<title>livegrep</title>
<style>
:root{
  --bg:#0b0f14; --panel:#0f141b; --ink:#cfd8e3; --muted:#8a94a6;
  --accent:#6ee7ff; --border:#1c2530; --danger:#ff5d5d; --match:#e879f9;
}
*{box-sizing:border-box}
body{ margin:0; background:var(--bg); color:var(--ink); font:15px/1.45 system-ui,Segoe UI,Roboto,Arial; }
.container{ max-width:1100px; margin:24px auto; padding:0 16px; }
.card{ background:var(--panel); border:1px solid var(--border); border-radius:16px; padding:18px; }
h1{ font-size:20px; margin:0 0 8px 0 }
.controls{ display:flex; gap:12px; align-items:center; margin:12px 0 4px 0 }
.controls input[type=text]{
  flex:1; padding:12px 14px; border-radius:12px; border:1px solid var(--border);
  background:#0b1117; color:var(--ink); outline:none; font-size:16px;
}
.controls input[type=text]:focus{ border-color:var(--accent) }
.meta{ color:var(--muted); font-size:13px; margin-top:6px }
.results{ margin-top:16px; border-radius:12px; border:1px solid var(--border) }
.row{ display:grid; grid-template-columns:18rem 1fr; gap:10px; padding:6px 14px; border-top:1px solid var(--border) }
.row:first-child{ border-top:none }
.path{ color:var(--muted); overflow:hidden; text-overflow:ellipsis; white-space:nowrap; direction:rtl; text-align:left }
.mono{ font-family: ui-monospace, SFMono-Regular, Menlo, Consolas, monospace; white-space:pre }
.hit{ color:var(--match); font-weight:600 }
.invalid{ color:var(--danger); padding:12px 14px }
.empty{ padding:24px; text-align:center; color:var(--muted) }
</style>
</head>
<body>
  <div class="container">
    <div class="card">
      <h1>livegrep</h1>
      <div class="controls">
        <input id="q" type="text" placeholder="Regex…" autocomplete="off" autofocus />
        <label class="meta"><input id="ci" type="checkbox" /> ignore case</label>
      </div>
      <div id="stats" class="meta">Ready.</div>
      <div id="out" class="results"><div class="empty">Start typing to search.</div></div>
    </div>
  </div>
<script>
const $ = (s) => document.querySelector(s);
const q = $("#q"), ci = $("#ci"), out = $("#out"), stats = $("#stats");
let t, last = "";
function esc(s){ return s.replace(/[&<>"]/g, c => ({"&":"&amp;","<":"&lt;",">":"&gt;",'"':"&quot;"}[c])); }
function paint(line, ranges){
  let html = "", pos = 0;
  for(const [s, e] of ranges){
    html += esc(line.slice(pos, s)) + `<span class="hit">${esc(line.slice(s, e))}</span>`;
    pos = e;
  }
  return html + esc(line.slice(pos));
}
async function search(){
  const url = `/api/search?q=${encodeURIComponent(q.value)}&i=${ci.checked ? 1 : 0}&width=160`;
  const t0 = performance.now();
  const rows = await (await fetch(url)).json();
  const body = JSON.stringify(rows);
  if(body === last) return;   // same results: leave the page alone
  last = body;
  stats.textContent = `Results: ${rows.length} • ~${Math.max(1, Math.round(performance.now() - t0))} ms`;
  if(rows.length === 1 && rows[0].path === "" && rows[0].line === "Invalid regex pattern"){
    out.innerHTML = `<div class="invalid">${esc(rows[0].line)}</div>`;
    return;
  }
  if(rows.length === 0){ out.innerHTML = `<div class="empty">No matches.</div>`; return; }
  out.innerHTML = rows.map(r =>
    `<div class="row"><div class="path" title="${esc(r.path)}">${esc(r.path)}</div>` +
    `<div class="mono">${paint(r.line, r.ranges)}</div></div>`).join("");
}
function debounced(){ clearTimeout(t); t = setTimeout(search, 100); }
q.addEventListener("input", debounced);
ci.addEventListener("change", debounced);
window.addEventListener("keydown", (ev) => { if(ev.key === "Escape"){ q.value = ""; debounced(); } });
search();
</script>
</body>
</html>
"""
    return Response(html, mimetype="text/html")


def serve(engine: Engine, *, host: str = "127.0.0.1", port: int = 8000,
          case_insensitive: bool = False, debug: bool = False) -> int:
    """Attach an already built engine and run the Flask dev server."""
    global _engine, _case_insensitive
    _engine = engine
    _case_insensitive = case_insensitive
    log.info("serving %d files on http://%s:%d", len(engine.files), host, port)
    # one request at a time: the content cache is not shared across threads
    app.run(host=host, port=port, debug=debug, use_reloader=False, threaded=False)
    return 0

from __future__ import annotations
import argparse
import logging
import os
import threading
from flask import Flask, request, jsonify, Response
from wordswap import Engine
from wordswap import config as CFG
from wordswap.models import EditResult

app = Flask(__name__)
_engine: Engine | None = Engine(CFG.DEFAULT_TEXT)
# One edit in flight at a time: the dev server answers requests on threads
_lock = threading.Lock()

log = logging.getLogger(__name__)


def _payload(res: EditResult | None = None):
    body = {"view": _engine.view().to_dict()}  # type: ignore[union-attr]
    if res is not None:
        body.update(res.to_dict())
    return jsonify(body)


def _bad_request(msg: str):
    return jsonify({"error": msg}), 400


def _json_index(data: dict, *, required: bool):
    """Returns (index, error). index may be None only when not required."""
    raw = data.get("index")
    if raw is None:
        return (None, "index is required") if required else (None, None)
    if isinstance(raw, bool) or not isinstance(raw, int):
        return None, "index must be an integer"
    return raw, None

# ---------- API ----------
@app.get("/api/health")
def api_health():
    return jsonify({"ok": _engine is not None})

@app.get("/api/document")
def api_document():
    with _lock:
        return _payload()

@app.post("/api/edit")
def api_edit():
    data = request.get_json(silent=True) or {}
    idx, err = _json_index(data, required=False)
    if err:
        return _bad_request(err)
    content = data.get("content", "")
    if not isinstance(content, str):
        return _bad_request("content must be a string")
    with _lock:
        res = _engine.edit(idx, content)  # type: ignore[union-attr]
        log.info("edit index=%r -> %s", idx, res.status.value)
        return _payload(res)

@app.post("/api/delete")
def api_delete():
    data = request.get_json(silent=True) or {}
    idx, err = _json_index(data, required=True)
    if err:
        return _bad_request(err)
    with _lock:
        return _payload(_engine.delete(idx))  # type: ignore[union-attr]

@app.post("/api/undo")
def api_undo():
    with _lock:
        return _payload(_engine.undo())  # type: ignore[union-attr]

@app.post("/api/redo")
def api_redo():
    with _lock:
        return _payload(_engine.redo())  # type: ignore[union-attr]

@app.post("/api/reset")
def api_reset():
    data = request.get_json(silent=True) or {}
    text = data.get("text", "")
    if not isinstance(text, str):
        return _bad_request("text must be a string")
    with _lock:
        _engine.reset(text)  # type: ignore[union-attr]
        return _payload()
# ---------- UI ----------
@app.get("/")
def home():
    # A tiny SPA: CSS variables + minimal JS, no external deps.
    html = r"""
<!doctype html>
<html lang="en">
<head>
<meta charset="utf-8" />
<meta name="viewport" content="width=device-width,initial-scale=1" />
<title>Word Replacement • Flask UI</title>
<style>
:root{
  --bg:#0b0f14;
  --panel:#0f141b;
  --ink:#cfd8e3;
  --muted:#8a94a6;
  --accent:#6ee7ff;
  --accent-2:#22d3ee;
  --border:#1c2530;
  --mark-bg:rgba(110,231,255,.2);
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
h1{ font-size:20px; margin:0 0 12px 0; letter-spacing:.3px }
.doc{ font-size:24px; font-weight:300; line-height:1.8; min-height:3em; white-space:pre-wrap }
.word{ padding:2px 3px; border-radius:6px; cursor:pointer }
.word:hover{ background:#0d131a }
.word.sel{ background:var(--mark-bg); border-bottom:1px solid var(--accent-2); color:var(--accent) }
.controls{ display:flex; gap:10px; align-items:center; margin-top:14px; flex-wrap:wrap }
.controls input{
  flex:1; min-width:240px; padding:12px 14px; border-radius:12px; border:1px solid var(--border);
  background:#0b1117; color:var(--ink); outline:none; font-size:16px;
}
.controls input:focus{ border-color:var(--accent) }
.btn{
  padding:10px 14px; border-radius:10px; border:1px solid var(--border);
  background:#0b1117; color:var(--ink); cursor:pointer;
}
.btn:hover{ border-color:var(--accent-2) }
.btn:disabled{ opacity:.4; cursor:default }
.meta{ display:flex; justify-content:space-between; color:var(--muted); font-size:13px; margin-top:8px }
kbd{ background:#111825; border:1px solid var(--border); padding:1px 6px; border-radius:6px; color:var(--ink) }
</style>
</head>
<body>
  <div class="container">
    <div class="card">
      <h1>Word Replacement</h1>
      <div id="doc" class="doc"></div>
      <div class="controls">
        <input id="content" type="text" placeholder="Transcript… (select a word to replace it)" autocomplete="off" autofocus />
        <button id="send" class="btn">Apply</button>
        <button id="del" class="btn" disabled>Delete word</button>
        <button id="undo" class="btn">Undo</button>
        <button id="redo" class="btn">Redo</button>
      </div>
      <div class="meta">
        <div id="status">Ready.</div>
        <div>Click a word to select it • <kbd>Esc</kbd> clears selection</div>
      </div>
    </div>
  </div>

<script>
const $ = (sel) => document.querySelector(sel);
const doc = $("#doc"), content = $("#content"), status = $("#status");
const undoBtn = $("#undo"), redoBtn = $("#redo"), delBtn = $("#del");
let selected = null;
let statusTimer;

function flash(msg){
  status.textContent = msg;
  clearTimeout(statusTimer);
  statusTimer = setTimeout(()=>{ status.textContent = "Ready."; }, 2500);
}

function render(view){
  doc.innerHTML = "";
  for(const t of view.tokens){
    const span = document.createElement("span");
    span.textContent = t.text;
    if(!t.is_whitespace){
      span.className = "word" + (t.index === selected ? " sel" : "");
      span.addEventListener("click", ()=>{
        selected = (selected === t.index) ? null : t.index;
        render(view);
      });
    }
    doc.appendChild(span);
  }
  undoBtn.disabled = !view.can_undo;
  redoBtn.disabled = !view.can_redo;
  delBtn.disabled = selected === null;
}

async function call(path, body){
  const resp = await fetch(path, {
    method: body === undefined ? "GET" : "POST",
    headers: {"Content-Type": "application/json"},
    body: body === undefined ? undefined : JSON.stringify(body),
  });
  const data = await resp.json();
  if(!resp.ok){ flash(`Error: ${data.error ?? resp.status}`); return; }
  if(data.status === "target_not_found" || data.changed){ selected = null; }
  render(data.view);
  if(data.message){ flash(data.message + (data.rule ? ` [${data.rule}]` : "")); }
}

$("#send").addEventListener("click", ()=>{
  call("/api/edit", {index: selected, content: content.value});
  content.value = "";
});
delBtn.addEventListener("click", ()=>{ if(selected !== null) call("/api/delete", {index: selected}); });
undoBtn.addEventListener("click", ()=> call("/api/undo", {}));
redoBtn.addEventListener("click", ()=> call("/api/redo", {}));
window.addEventListener("keydown", (ev)=>{
  if(ev.key === "Enter"){ $("#send").click(); }
  else if(ev.key === "Escape"){ selected = null; call("/api/document"); }
});
call("/api/document");
</script>
</body>
</html>
"""
    return Response(html, mimetype="text/html")

def main(argv=None) -> int:
    ap = argparse.ArgumentParser(description="Run Flask UI on top of Engine")
    src = ap.add_mutually_exclusive_group()
    src.add_argument("--text", default=None)
    src.add_argument("--file", default=None)
    ap.add_argument("--host", default=CFG.HOST)
    ap.add_argument("--port", type=int, default=CFG.PORT)
    ap.add_argument("--verbose", action="store_true")
    args = ap.parse_args(argv)

    if args.verbose:
        logging.basicConfig(level=logging.INFO)
        os.environ["WORDSWAP_VERBOSE"] = "1"

    if args.file:
        with open(args.file, encoding="utf-8") as f:
            text = f.read().strip()
    else:
        text = args.text if args.text is not None else CFG.DEFAULT_TEXT

    global _engine
    _engine = Engine(text)
    app.run(host=args.host, port=args.port, debug=args.verbose)
    return 0

if __name__ == "__main__":
    raise SystemExit(main())

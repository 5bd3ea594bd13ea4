"""Generate a self-contained HTML report.

The report embeds all data as a JSON blob inside a ``<script>`` tag and
builds the page client-side with ``textContent`` only, so file names and
module specifiers never reach the DOM as markup. It has no external
dependencies and can be opened from any local file:// path.
"""

import json
from pathlib import Path
from typing import Union

from ..analysis.duplicates import duplicate_paths
from ..formatters.json_formatter import result_to_dict
from ..models import AnalysisResult


def generate_report(
    result: AnalysisResult,
    project_name: str,
    output_path: Union[str, Path] = "analysis_report.html",
    root: str = "",
) -> str:
    """Write the HTML report and return its absolute path.

    Parameters
    ----------
    result:
        The analysis snapshot to render.
    project_name:
        Shown in the page title and header.
    output_path:
        Where to write the HTML file; parent directories are created.
    root:
        Project root; file paths are shown relative to it.
    """
    data = result_to_dict(result)
    data["project_name"] = project_name
    data["root"] = root
    data["duplicate_paths"] = sorted(duplicate_paths(result.duplicate_groups))

    # "</" would end the script element early
    data_json = json.dumps(data).replace("</", "<\\/")

    out = Path(output_path).resolve()
    out.parent.mkdir(parents=True, exist_ok=True)
    out.write_text(_build_html(data_json), encoding="utf-8")
    return str(out)


# ── Private helpers ──────────────────────────────────────────────────


def _build_html(data_json: str) -> str:
    """Build the page around the embedded data.

    The f-string uses {{ / }} to produce literal braces in the CSS and JS.
    """
    return f"""<!DOCTYPE html>
<html lang="en">
<head>
<meta charset="utf-8">
<meta name="viewport" content="width=device-width, initial-scale=1">
<title>TypeScript Analysis Report</title>
<style>
  body {{ font-family: -apple-system, BlinkMacSystemFont, "Segoe UI", sans-serif;
         margin: 0; padding: 24px 32px; background: #f6f8fa; color: #24292f; }}
  h1 {{ margin: 0 0 4px; font-size: 24px; }}
  h2 {{ margin: 32px 0 12px; font-size: 18px; }}
  .muted {{ color: #57606a; font-size: 13px; }}
  .cards {{ display: flex; flex-wrap: wrap; gap: 12px; margin-top: 20px; }}
  .card {{ background: #fff; border: 1px solid #d0d7de; border-radius: 6px;
           padding: 12px 16px; min-width: 140px; }}
  .card .label {{ color: #57606a; font-size: 12px; text-transform: uppercase; }}
  .card .value {{ font-size: 22px; font-weight: 600; margin-top: 4px; }}
  .level-Low {{ color: #1a7f37; }}
  .level-Medium {{ color: #9a6700; }}
  .level-High {{ color: #cf222e; }}
  .level-Very-High {{ color: #82071e; }}
  table {{ border-collapse: collapse; width: 100%; background: #fff; font-size: 13px; }}
  th, td {{ border: 1px solid #d0d7de; padding: 6px 8px; text-align: left; vertical-align: top; }}
  th {{ background: #eaeef2; cursor: pointer; user-select: none; }}
  td.num {{ text-align: right; font-variant-numeric: tabular-nums; }}
  tr.dup td {{ background: #fff8c5; }}
  .deps {{ color: #57606a; }}
  .group {{ background: #fff; border: 1px solid #d0d7de; border-radius: 6px;
            padding: 8px 12px; margin-bottom: 8px; }}
  .hash {{ font-family: ui-monospace, monospace; color: #57606a; font-size: 12px; }}
</style>
</head>
<body>
<h1 id="title"></h1>
<div class="muted" id="subtitle"></div>
<div class="cards" id="cards"></div>

<h2>Files</h2>
<table id="files"><thead><tr id="file-head"></tr></thead><tbody id="file-body"></tbody></table>

<div id="duplicates-section" hidden>
  <h2>Duplicate files</h2>
  <div id="duplicates"></div>
</div>

<div id="skipped-section" hidden>
  <h2>Skipped files</h2>
  <table><thead><tr><th>File</th><th>Reason</th></tr></thead><tbody id="skipped"></tbody></table>
</div>

<script>
const DATA = {data_json};

function el(tag, text, cls) {{
  const node = document.createElement(tag);
  if (text !== undefined && text !== null) node.textContent = String(text);
  if (cls) node.className = cls;
  return node;
}}

function rel(path) {{
  if (DATA.root && path.startsWith(DATA.root)) {{
    return path.slice(DATA.root.length).replace(/^[\\/\\\\]+/, "") || path;
  }}
  return path;
}}

function renderHeader() {{
  document.title = DATA.project_name + " — TypeScript Analysis Report";
  document.getElementById("title").textContent = DATA.project_name;
  document.getElementById("subtitle").textContent =
    "Generated " + new Date().toLocaleString();
}}

function renderCards() {{
  const s = DATA.summary;
  const cards = document.getElementById("cards");
  const add = (label, value, cls) => {{
    const card = el("div", null, "card");
    card.appendChild(el("div", label, "label"));
    card.appendChild(el("div", value, "value" + (cls ? " " + cls : "")));
    cards.appendChild(card);
  }};
  add("Files", s.total_files);
  add("Lines", s.total_lines);
  add("Code lines", s.total_code_lines);
  if (s.total_functions !== null) add("Functions", s.total_functions);
  if (s.total_complexity !== null) {{
    add("Complexity", s.total_complexity);
    add("Complexity level", s.complexity_level,
        "level-" + s.complexity_level.replace(" ", "-"));
  }}
  if (s.duplicate_group_count !== null) add("Duplicate groups", s.duplicate_group_count);
}}

const COLUMNS = [
  {{ key: "path", label: "File", show: () => true, text: (r) => rel(r.path) }},
  {{ key: "total_lines", label: "Lines", num: true, show: () => true }},
  {{ key: "code_lines", label: "Code lines", num: true, show: () => true }},
  {{ key: "function_count", label: "Functions", num: true, show: () => DATA.options.functions }},
  {{ key: "complexity", label: "Complexity", num: true, show: () => DATA.options.complexity }},
  {{ key: "dependencies", label: "Dependencies", show: () => true,
     text: (r) => r.dependencies.join(", "), cls: "deps",
     sortValue: (r) => r.dependencies.length }},
].filter((c) => c.show());

let sortKey = DATA.options.complexity ? "complexity" : "path";
let sortDesc = DATA.options.complexity;

function sortValue(col, row) {{
  if (col.sortValue) return col.sortValue(row);
  return row[col.key];
}}

function renderFiles() {{
  const head = document.getElementById("file-head");
  head.replaceChildren();
  for (const col of COLUMNS) {{
    const arrow = col.key === sortKey ? (sortDesc ? " ▼" : " ▲") : "";
    const th = el("th", col.label + arrow);
    th.addEventListener("click", () => {{
      if (sortKey === col.key) sortDesc = !sortDesc;
      else {{ sortKey = col.key; sortDesc = !!col.num; }}
      renderFiles();
    }});
    head.appendChild(th);
  }}

  const col = COLUMNS.find((c) => c.key === sortKey) || COLUMNS[0];
  const rows = DATA.files.slice().sort((a, b) => {{
    const va = sortValue(col, a), vb = sortValue(col, b);
    const cmp = va < vb ? -1 : va > vb ? 1 : 0;
    return sortDesc ? -cmp : cmp;
  }});

  const dupes = new Set(DATA.duplicate_paths);
  const body = document.getElementById("file-body");
  body.replaceChildren();
  for (const row of rows) {{
    const tr = el("tr", null, dupes.has(row.path) ? "dup" : "");
    for (const c of COLUMNS) {{
      const value = c.text ? c.text(row) : row[c.key];
      tr.appendChild(el("td", value, c.num ? "num" : c.cls));
    }}
    body.appendChild(tr);
  }}
}}

function renderDuplicates() {{
  if (!DATA.duplicates.length) return;
  document.getElementById("duplicates-section").hidden = false;
  const box = document.getElementById("duplicates");
  for (const group of DATA.duplicates) {{
    const div = el("div", null, "group");
    div.appendChild(el("div", group.hash, "hash"));
    const list = el("ul");
    for (const path of group.files) list.appendChild(el("li", rel(path)));
    div.appendChild(list);
    box.appendChild(div);
  }}
}}

function renderSkipped() {{
  if (!DATA.skipped.length) return;
  document.getElementById("skipped-section").hidden = false;
  const body = document.getElementById("skipped");
  for (const skip of DATA.skipped) {{
    const tr = el("tr");
    tr.appendChild(el("td", rel(skip.path)));
    tr.appendChild(el("td", skip.reason));
    body.appendChild(tr);
  }}
}}

renderHeader();
renderCards();
renderFiles();
renderDuplicates();
renderSkipped();
</script>
</body>
</html>
"""

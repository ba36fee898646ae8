HTML = """<!doctype html><meta charset="utf-8">
<title>Soul:23 — Service status</title>
<style>
body{font-family:sans-serif;margin:24px}
.grid{display:grid;grid-template-columns:repeat(auto-fill,minmax(300px,1fr));gap:12px}
.card{border:1px solid #ddd;border-radius:10px;padding:12px}
.badge{padding:2px 8px;border-radius:999px;font-size:12px}
.ok{background:#e6ffec}.warning{background:#fff8e1}.down{background:#ffebe6}
.url{color:#555;font-size:12px;word-break:break-all}
.meta{color:#666;font-size:12px}
h2{margin-top:28px}
</style>
<h1>Soul:23 — Service status</h1>
<button onclick="run()">Refresh now</button>
<div id="ts" class="meta"></div>
<div id="sections"></div>
<script>
const SECTIONS = [["internos", "Internal"], ["empresa", "Company sites"], ["externos", "External"]];

function badgeClass(state){
  const s = String(state).toLowerCase();
  if (s.includes('ok')) return 'ok';
  if (s.includes('warning')) return 'warning';
  return 'down';
}

function names(section){
  return Object.keys(section).filter(k => k.endsWith('_url')).map(k => k.slice(0, -4));
}

async function run(){
  const root = document.getElementById('sections');
  const r = await fetch('/healthchecker', {cache:'no-store'});
  const data = await r.json();
  if (!r.ok){
    root.innerHTML = '<div class="card down">' + (data.details || data.error) + '</div>';
    return;
  }
  document.getElementById('ts').textContent =
    'Checked at ' + new Date(data.timestamp).toLocaleString() + ' in ' + data.execution_time_seconds + ' s';
  root.innerHTML = '';
  for (const [key, title] of SECTIONS){
    const section = data[key] || {};
    const h = document.createElement('h2'); h.textContent = title; root.appendChild(h);
    const grid = document.createElement('div'); grid.className = 'grid';
    for (const name of names(section)){
      const state = section[name + '_state'];
      const div = document.createElement('div'); div.className = 'card';
      div.innerHTML = `
        <div style="display:flex;justify-content:space-between;align-items:center">
          <strong>${name}</strong>
          <span class="badge ${badgeClass(state)}">${state}</span>
        </div>
        <div class="url">${section[name + '_url']}</div>
        <div class="meta">status: ${section[name + '_status']}</div>`;
      grid.appendChild(div);
    }
    root.appendChild(grid);
  }
}
run(); setInterval(run, 300000);
</script>
"""

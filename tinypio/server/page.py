"""Single-page web UI served at GET /.

The page talks to the JSON API only: it loads examples, drivers and
status on startup, and posts the editor contents to /api/validate or
/api/compile.
"""

INDEX_HTML = """<!DOCTYPE html>
<html>
<head>
<meta charset="utf-8">
<title>tinypio - PIO Development Toolkit</title>
<style>
  body { font-family: system-ui; max-width: 900px; margin: 2rem auto; padding: 0 1rem; }
  textarea { width: 100%; height: 200px; font-family: monospace; font-size: 14px; }
  pre { background: #f5f5f5; padding: 1rem; overflow-x: auto; font-size: 13px; }
  .error { color: #dc3545; }
  .valid { color: #28a745; }
  button { padding: 0.5rem 1rem; cursor: pointer; margin-right: 0.5rem; }
  button.primary { background: #0066cc; color: white; border: none; }
  .examples { display: flex; gap: 0.5rem; margin-bottom: 1rem; align-items: center; }
  .examples button { font-size: 0.85rem; }
  .tabs { display: flex; margin-top: 1rem; border-bottom: 2px solid #ddd; }
  .tabs button { border: none; background: #f5f5f5; border-radius: 4px 4px 0 0; }
  .tabs button.active { background: #0066cc; color: white; }
  .tab-content { display: none; padding: 1rem 0; }
  .tab-content.active { display: block; }
  .status { font-size: 0.85rem; color: #666; margin-top: 2rem; padding: 1rem; background: #f9f9f9; border-radius: 4px; }
  .status .ok { color: #28a745; }
  .status .missing { color: #dc3545; }
  .driver-list { display: grid; gap: 1rem; margin-top: 1rem; }
  .driver { background: #f5f5f5; padding: 1rem; border-radius: 4px; }
  .driver h4 { margin: 0 0 0.5rem 0; }
  .driver code { background: #e0e0e0; padding: 0.2rem 0.4rem; border-radius: 2px; font-size: 0.8rem; }
  .actions { margin: 1rem 0; }
</style>
</head>
<body>
<h1>tinypio - PIO Development Toolkit</h1>
<p>Validate and compile RP2040/RP2350 PIO assembly programs.
Powered by <a href="https://github.com/tinygo-org/pio">TinyGo PIO</a>.</p>

<div class="examples" id="examples"><span>Examples:</span></div>

<textarea id="source" placeholder="Paste PIO assembly here..."></textarea>

<div class="actions">
  <button class="primary" onclick="validateSource()">Validate</button>
  <button onclick="compileSource('hex')">Compile (Hex)</button>
  <button onclick="compileSource('go')">Compile (Go)</button>
</div>

<div class="tabs">
  <button class="active" data-tab="validation" onclick="showTab('validation')">Validation</button>
  <button data-tab="compiled" onclick="showTab('compiled')">Compiled Output</button>
  <button data-tab="drivers" onclick="showTab('drivers')">Drivers</button>
</div>

<div id="validation" class="tab-content active"><div id="result"></div></div>
<div id="compiled" class="tab-content"><div id="compile-result"></div></div>
<div id="drivers" class="tab-content">
  <p>Ready-to-use PIO drivers from <code>github.com/tinygo-org/pio/rp2-pio/piolib</code>:</p>
  <div id="driver-list" class="driver-list"></div>
</div>

<div class="status" id="status">Loading status...</div>

<script>
let examples = [];

function escapeHtml(text) {
  const div = document.createElement('div');
  div.textContent = text;
  return div.innerHTML;
}

function errorList(errors) {
  let html = '<ul>';
  (errors || []).forEach(e => html += '<li class="error">' + escapeHtml(e) + '</li>');
  return html + '</ul>';
}

function showTab(name) {
  document.querySelectorAll('.tabs button').forEach(b =>
    b.classList.toggle('active', b.dataset.tab === name));
  document.querySelectorAll('.tab-content').forEach(c =>
    c.classList.toggle('active', c.id === name));
}

function loadExample(name) {
  const ex = examples.find(e => e.name === name);
  if (ex) document.getElementById('source').value = ex.source;
}

async function postJSON(url, body) {
  const resp = await fetch(url, {
    method: 'POST',
    headers: {'Content-Type': 'application/json'},
    body: JSON.stringify(body)
  });
  return resp.json();
}

async function validateSource() {
  showTab('validation');
  const source = document.getElementById('source').value;
  const data = await postJSON('/api/validate', {source});
  let html = '';
  if (data.valid) {
    html += '<p class="valid">&#10003; Valid PIO program (' + data.instructions.length + '/32 instructions)</p>';
  } else {
    html += '<p class="error">&#10007; Invalid:</p>' + errorList(data.errors);
  }
  if (data.instructions.length > 0) {
    html += '<h4>Parsed Instructions:</h4>';
    html += '<pre>' + escapeHtml(JSON.stringify(data.instructions, null, 2)) + '</pre>';
  }
  document.getElementById('result').innerHTML = html;
}

async function compileSource(format) {
  showTab('compiled');
  const source = document.getElementById('source').value;
  const data = await postJSON('/api/compile', {source, format});
  let html = '';
  if (data.success) {
    html += '<p class="valid">&#10003; Compilation successful</p>';
    if (data.go) html += '<h4>Go Output:</h4><pre>' + escapeHtml(data.go) + '</pre>';
    if (data.hex) html += '<h4>Hex Output:</h4><pre>' + escapeHtml(data.hex) + '</pre>';
    if (data.binary && data.binary.length > 0) {
      html += '<h4>Binary (' + data.binary.length + ' instructions):</h4><pre>';
      html += data.binary.map(b => '0x' + b.toString(16).padStart(4, '0')).join(', ');
      html += '</pre>';
    }
  } else {
    html += '<p class="error">&#10007; Compilation failed:</p>' + errorList(data.errors);
  }
  document.getElementById('compile-result').innerHTML = html;
}

async function loadExamples() {
  const resp = await fetch('/api/examples');
  examples = await resp.json();
  const bar = document.getElementById('examples');
  examples.forEach(ex => {
    const button = document.createElement('button');
    button.textContent = ex.name;
    button.title = ex.description;
    button.onclick = () => loadExample(ex.name);
    bar.appendChild(button);
  });
  if (examples.length > 0) loadExample(examples[0].name);
}

async function loadDrivers() {
  const resp = await fetch('/api/drivers');
  const drivers = await resp.json();
  let html = '';
  drivers.forEach(d => {
    html += '<div class="driver"><h4>' + escapeHtml(d.name) + '</h4>';
    html += '<p>' + escapeHtml(d.description) + '</p>';
    html += '<code>' + escapeHtml(d.package) + '</code>';
    if (d.example) html += '<pre>' + escapeHtml(d.example) + '</pre>';
    html += '</div>';
  });
  document.getElementById('driver-list').innerHTML = html;
}

async function loadStatus() {
  const resp = await fetch('/api/status');
  const s = await resp.json();
  let html = '<strong>Status:</strong> Validator <span class="ok">&#10003;</span> | ';
  html += 'pioasm ' + (s.pioasm ? '<span class="ok">&#10003;</span>' : '<span class="missing">&#10007; not installed</span>') + ' | ';
  html += s.drivers + ' drivers | ' + s.examples + ' examples | ';
  html += 'Max ' + s.max_instructions + ' instructions';
  if (!s.pioasm) {
    html += '<br><small>Install pioasm: <code>git clone pico-sdk &amp;&amp; cd tools/pioasm &amp;&amp; cmake . &amp;&amp; make &amp;&amp; sudo make install</code></small>';
  }
  document.getElementById('status').innerHTML = html;
}

loadExamples();
loadDrivers();
loadStatus();
</script>
</body>
</html>
"""

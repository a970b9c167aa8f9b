"""Minimal browser UI for scanning and analyzing labels."""

SCANNER_UI_HTML = """<!doctype html>
<html lang="en">
  <head>
    <meta charset="utf-8" />
    <meta name="viewport" content="width=device-width, initial-scale=1" />
    <title>Nutrition Label Scanner</title>
    <style>
      body { font-family: ui-sans-serif, system-ui, sans-serif; margin: 2rem; }
      h1 { margin-bottom: 0.5rem; }
      .row { margin-bottom: 1rem; }
      button { padding: 0.4rem 0.8rem; margin-right: 0.5rem; }
      textarea { width: 100%; min-height: 8rem; }
      .badge { display: inline-block; padding: 0.2rem 0.6rem; margin: 0.2rem;
               border-radius: 999px; background: #fee2e2; color: #b91c1c; }
      .badge.notice { background: #dbeafe; color: #1d4ed8; }
      pre { background: #f6f6f6; padding: 1rem; overflow: auto; }
    </style>
  </head>
  <body>
    <h1>Nutrition Label Scanner</h1>
    <div class="row">
      <input id="file" type="file" accept="image/*" />
      <button id="scan" onclick="scanLabel()">Scan Label</button>
    </div>
    <div class="row">
      <textarea id="text" placeholder="Extracted label text"></textarea>
      <button id="analyze" onclick="analyzeText()">Analyze Nutrition</button>
    </div>
    <div id="result"></div>
    <div class="row" id="chat" hidden>
      <pre id="messages"></pre>
      <input id="question" placeholder="Ask a follow-up question..." />
      <button id="send" onclick="sendQuestion()">Send</button>
    </div>
    <pre id="status">Ready.</pre>
    <script>
      let analysis = null;
      let history = [];

      function setBusy(id, busy) {
        document.getElementById(id).disabled = busy;
      }

      async function callApi(path, options) {
        const res = await fetch(path, options);
        const data = await res.json();
        if (!res.ok) {
          throw new Error(data.detail || ('Error: ' + res.status));
        }
        return data;
      }

      async function scanLabel() {
        const file = document.getElementById('file').files[0];
        if (!file) return;
        const status = document.getElementById('status');
        const body = new FormData();
        body.append('file', file);
        setBusy('scan', true);
        status.textContent = 'Scanning...';
        try {
          const data = await callApi('/api/scan', { method: 'POST', body });
          document.getElementById('text').value = data.text;
          status.textContent = 'Label scanned successfully!';
        } catch (err) {
          status.textContent = 'OCR Failed: ' + err.message;
        } finally {
          setBusy('scan', false);
        }
      }

      async function analyzeText() {
        const text = document.getElementById('text').value;
        const status = document.getElementById('status');
        setBusy('analyze', true);
        status.textContent = 'Analyzing nutritional information...';
        try {
          const data = await callApi('/api/analyze', {
            method: 'POST',
            headers: { 'Content-Type': 'application/json' },
            body: JSON.stringify({ text })
          });
          analysis = data.analysis;
          history = [];
          renderView(data.view);
          document.getElementById('messages').textContent = '';
          document.getElementById('chat').hidden = false;
          status.textContent = 'Analysis Complete';
        } catch (err) {
          status.textContent = 'Analysis Failed: ' + err.message;
        } finally {
          setBusy('analyze', false);
        }
      }

      function renderView(view) {
        const parts = [];
        if (view.chart) {
          parts.push('<h3>Nutrient Breakdown</h3><ul>' +
            view.chart.labels.map(l => '<li>' + escapeHtml(l) + '</li>').join('') +
            '</ul>');
        } else {
          parts.push('<p>No nutrient data available for chart.</p>');
        }
        if (view.healthImplicationsHtml.length) {
          parts.push('<h3>Health Implications</h3><ul>' +
            view.healthImplicationsHtml.map(h => '<li>' + h + '</li>').join('') +
            '</ul>');
        }
        if (view.allergens.length) {
          parts.push('<h3>Allergens</h3>' + view.allergens.map(a =>
            '<span class="badge' + (a.alert ? '' : ' notice') + '">' +
            escapeHtml(a.text) + '</span>').join(''));
        }
        if (view.overallAssessment) {
          parts.push('<h3>Overall Assessment</h3><p>' +
            escapeHtml(view.overallAssessment) + '</p>');
        }
        if (view.citations.length) {
          parts.push('<h3>Citations</h3><ul>' + view.citations.map(c =>
            '<li><a href="' + escapeHtml(c) + '" target="_blank" ' +
            'rel="noopener noreferrer">' + escapeHtml(c) + '</a></li>').join('') +
            '</ul>');
        }
        document.getElementById('result').innerHTML = parts.join('');
      }

      async function sendQuestion() {
        const input = document.getElementById('question');
        const question = input.value.trim();
        if (!question || !analysis) return;
        const status = document.getElementById('status');
        setBusy('send', true);
        try {
          const data = await callApi('/api/chat', {
            method: 'POST',
            headers: { 'Content-Type': 'application/json' },
            body: JSON.stringify({
              extractedText: document.getElementById('text').value,
              analysis, history, question
            })
          });
          history = data.messages;
          input.value = '';
          document.getElementById('messages').textContent = history
            .map(m => (m.sender === 'user' ? 'You: ' : 'AI: ') + m.text)
            .join('\\n');
        } catch (err) {
          status.textContent = 'Chat Error: ' + err.message;
        } finally {
          setBusy('send', false);
        }
      }

      function escapeHtml(value) {
        const div = document.createElement('div');
        div.textContent = value;
        return div.innerHTML;
      }
    </script>
  </body>
</html>
"""

"""Minimal HTML shell for the overview, database and compare views."""

UI_HTML = """<!doctype html>
<html lang="en">
  <head>
    <meta charset="utf-8" />
    <meta name="viewport" content="width=device-width, initial-scale=1" />
    <title>LensBase</title>
    <style>
      body { font-family: ui-sans-serif, system-ui, sans-serif; margin: 2rem; }
      nav button { padding: 0.4rem 0.8rem; margin-right: 0.5rem; }
      .row { margin: 1rem 0; }
      input, select { padding: 0.4rem 0.6rem; }
      .grid { display: flex; flex-wrap: wrap; gap: 1rem; }
      .card { width: 220px; border: 1px solid #e2e8f0; padding: 0.5rem; }
      .card img { width: 100%; }
      .selected { border-color: #3b82f6; }
      pre { background: #f6f6f6; padding: 1rem; overflow: auto; }
    </style>
  </head>
  <body>
    <h1>LensBase</h1>
    <nav>
      <button onclick="showOverview()">Overview</button>
      <button onclick="showDatabase()">Database</button>
      <button onclick="showCompare()">Compare</button>
    </nav>
    <div id="view">Ready.</div>
    <script>
      const view = document.getElementById('view');

      async function api(path, options) {
        const res = await fetch(path, options);
        if (!res.ok) {
          throw new Error('Error: ' + res.status);
        }
        return res.json();
      }

      function card(photo, onclick, selected) {
        const cls = selected ? 'card selected' : 'card';
        const action = onclick ? ' onclick="' + onclick + '"' : '';
        return '<div class="' + cls + '"' + action + '>' +
          '<img src="' + photo.url + '" alt="" />' +
          '<strong>' + photo.filename + '</strong><br />' +
          photo.category + ' &middot; ' + (photo.location.name || '') + '<br />' +
          photo.tags.slice(0, 3).join(', ') + '</div>';
      }

      async function showOverview() {
        const stats = await api('/api/overview');
        view.innerHTML = '<h2>Overview</h2>' +
          '<p>Total: ' + stats.total + ' &middot; Locations: ' + stats.locations +
          ' &middot; Tags: ' + stats.tags + '</p>' +
          '<pre>' + JSON.stringify({categories: stats.categories, uploads: stats.uploads}, null, 2) + '</pre>' +
          '<div class="grid">' + stats.recent.map(p => card(p)).join('') + '</div>';
      }

      async function showDatabase() {
        const cats = await api('/api/categories');
        view.innerHTML = '<h2>Database</h2>' +
          '<div class="row"><input id="q" placeholder="Search by name, tags, or notes..." />' +
          '<select id="category">' + cats.categories.map(c => '<option>' + c + '</option>').join('') + '</select>' +
          '<button onclick="loadPhotos()">Search</button></div>' +
          '<div class="row"><input id="file" type="file" accept="image/*" />' +
          '<button id="upload" onclick="uploadPhoto()">Upload Photo</button></div>' +
          '<div id="photos" class="grid"></div>';
        await loadPhotos();
      }

      async function loadPhotos() {
        const q = encodeURIComponent(document.getElementById('q').value);
        const category = encodeURIComponent(document.getElementById('category').value);
        const data = await api('/api/photos?q=' + q + '&category=' + category);
        document.getElementById('photos').innerHTML = data.photos.length
          ? data.photos.map(p => card(p)).join('')
          : 'No photos found.';
      }

      async function uploadPhoto() {
        const input = document.getElementById('file');
        if (!input.files.length) {
          return;
        }
        const button = document.getElementById('upload');
        button.disabled = true;
        button.textContent = 'Analyzing...';
        const form = new FormData();
        form.append('file', input.files[0]);
        try {
          await api('/api/photos', { method: 'POST', body: form });
        } finally {
          button.disabled = false;
          button.textContent = 'Upload Photo';
          input.value = '';
        }
        await loadPhotos();
      }

      async function showCompare() {
        const [photos, state] = await Promise.all([
          api('/api/photos'),
          api('/api/compare'),
        ]);
        view.innerHTML = '<h2>Compare</h2>' +
          '<div class="grid">' + photos.photos.map(p =>
            card(p, "toggleCompare('" + p.id + "')", state.selectedIds.includes(p.id))
          ).join('') + '</div>' +
          '<h3>Selected (zoom ' + state.zoom + 'x)</h3>' +
          '<div class="grid">' + state.photos.map(p => card(p)).join('') + '</div>' +
          (state.showMetadata
            ? '<pre>' + JSON.stringify(state.photos.map(p => p.metadata), null, 2) + '</pre>'
            : '');
      }

      async function toggleCompare(id) {
        await api('/api/compare/toggle/' + encodeURIComponent(id), { method: 'POST' });
        await showCompare();
      }

      showOverview();
    </script>
  </body>
</html>
"""

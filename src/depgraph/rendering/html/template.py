"""HTML documents for the browsable graph and tree views.

Both templates are complete HTML5 documents with placeholders for:
    ``{{TITLE}}`` -- escaped page title.
    ``{{CSS}}``   -- embedded stylesheet (from styles module).
    ``{{JS}}``    -- embedded script (from scripts module).

The data itself is not inlined: each page loads a sibling ``*.js`` file
that assigns the payload to a global, so the payload can be regenerated
without rewriting the page.
"""

from __future__ import annotations

GRAPH_HTML: str = """<!DOCTYPE html>
<html lang="en">
<head>
<meta charset="UTF-8">
<meta name="viewport" content="width=device-width,initial-scale=1">
<title>{{TITLE}}</title>
<style>
{{CSS}}
</style>
<script src="https://d3js.org/d3.v5.min.js"></script>
<script src="https://cdn.jsdelivr.net/npm/dagre-d3@0.6.4/dist/dagre-d3.min.js"></script>
<script src="https://cdn.jsdelivr.net/npm/graphlib-dot@0.6.4/dist/graphlib-dot.min.js"></script>
<script src="dependencies.dot.js"></script>
</head>
<body>

<div class="header">
  <h1>{{TITLE}}</h1>
  <div class="subtitle">Drag to pan, scroll to zoom. Dashed edges point from an evicted version to its replacement.</div>
</div>

<div class="container">
  <svg id="graph" width="100%" height="100%"><g></g></svg>
</div>

<script>
{{JS}}
</script>
</body>
</html>
"""

TREE_HTML: str = """<!DOCTYPE html>
<html lang="en">
<head>
<meta charset="UTF-8">
<meta name="viewport" content="width=device-width,initial-scale=1">
<title>{{TITLE}}</title>
<style>
{{CSS}}
</style>
<script src="tree.data.js"></script>
</head>
<body>

<div class="header">
  <h1>{{TITLE}}</h1>
  <div class="subtitle">Click a module to expand or collapse its dependencies.</div>
</div>

<div class="container">
  <div class="toolbar">
    <input id="search" type="search" placeholder="Filter modules...">
    <button id="expand-all">Expand all</button>
    <button id="collapse-all">Collapse all</button>
  </div>
  <ul id="tree" class="tree"></ul>
</div>

<script>
{{JS}}
</script>
</body>
</html>
"""

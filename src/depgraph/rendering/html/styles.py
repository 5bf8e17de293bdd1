"""Embedded CSS shared by the browsable graph and tree pages."""

from __future__ import annotations

BROWSE_CSS: str = """
*,*::before,*::after{box-sizing:border-box;margin:0;padding:0}
html,body{height:100%}
body{font-family:-apple-system,BlinkMacSystemFont,'Segoe UI',Roboto,
  Oxygen,Ubuntu,sans-serif;background:#f1f5f9;color:#1e293b;line-height:1.5}
.header{background:#1a1a2e;color:#fff;padding:16px 32px}
.header h1{font-size:1.3rem;font-weight:700;letter-spacing:-0.02em}
.header .subtitle{font-size:0.85rem;color:#94a3b8;margin-top:2px}
.container{padding:16px 32px;height:calc(100% - 80px)}
svg#graph{background:#fff;border-radius:8px;box-shadow:0 1px 3px rgba(0,0,0,.08)}
.node rect{stroke:#334155;fill:#fff;stroke-width:1px}
.node text{font-size:12px}
.edgePath path{stroke:#64748b;fill:#64748b;stroke-width:1.2px}
.edgeLabel text{font-size:11px;fill:#dc2626}
.toolbar{display:flex;gap:8px;margin-bottom:12px}
.toolbar input{flex:1;max-width:420px;padding:6px 10px;border:1px solid #cbd5e1;
  border-radius:6px;font-size:0.9rem}
.toolbar button{padding:6px 12px;border:1px solid #cbd5e1;background:#fff;
  border-radius:6px;cursor:pointer;font-size:0.85rem}
.toolbar button:hover{background:#e2e8f0}
ul.tree,ul.tree ul{list-style:none;padding-left:18px}
ul.tree{background:#fff;border-radius:8px;padding:12px 24px;
  box-shadow:0 1px 3px rgba(0,0,0,.08);font-family:ui-monospace,Menlo,monospace;
  font-size:0.85rem}
ul.tree li{margin:2px 0}
ul.tree li.collapsed>ul{display:none}
ul.tree .label{cursor:pointer}
ul.tree .label::before{content:"\\25BE";display:inline-block;width:14px;color:#64748b}
ul.tree li.collapsed>.label::before{content:"\\25B8"}
ul.tree li.leaf>.label::before{content:"";}
ul.tree .evicted{color:#94a3b8;text-decoration:line-through}
ul.tree .failed{color:#dc2626}
ul.tree .cycle{color:#ca8a04;font-style:italic}
ul.tree li.hidden{display:none}
"""

"""Embedded JavaScript for the browsable graph and tree pages.

The graph page parses the DOT text assigned to ``window.__DEPGRAPH_DOT__``
with graphlib-dot and lays it out with dagre-d3. The tree page renders the
nested structure assigned to ``window.__DEPGRAPH_TREE__`` as a collapsible
list in plain ES5; it needs no external library.

Security note: module text is inserted with ``textContent`` only; nothing
from the payload is ever assigned to ``innerHTML``.
"""

from __future__ import annotations

GRAPH_JS: str = r"""
(function(){
"use strict";
var dot=window.__DEPGRAPH_DOT__;
if(!dot){document.body.textContent="No graph data found.";return;}

var g=graphlibDot.read(dot);
g.graph().rankdir=g.graph().rankdir||"LR";
g.graph().nodesep=20;
g.graph().ranksep=60;

var render=new dagreD3.render();
var svg=d3.select("svg#graph");
var inner=svg.select("g");
var zoom=d3.zoom().on("zoom",function(){
  inner.attr("transform",d3.event.transform);
});
svg.call(zoom);
render(inner,g);

var box=svg.node().getBoundingClientRect();
var scale=Math.min(1,box.width/(g.graph().width+40));
svg.call(zoom.transform,
  d3.zoomIdentity.translate(20,20).scale(scale));
})();
"""

TREE_JS: str = r"""
(function(){
"use strict";
var roots=window.__DEPGRAPH_TREE__;
var container=document.getElementById("tree");
if(!roots){container.textContent="No tree data found.";return;}

function classFor(text){
  if(/ \(cycle\)$/.test(text))return"cycle";
  if(/ \(errors: /.test(text))return"failed";
  if(/ \(evicted by /.test(text))return"evicted";
  return"";
}

function build(node){
  var li=document.createElement("li");
  var label=document.createElement("span");
  label.className="label "+classFor(node.text);
  label.textContent=node.text;
  li.appendChild(label);
  li.setAttribute("data-text",node.text.toLowerCase());
  if(node.children&&node.children.length){
    var ul=document.createElement("ul");
    node.children.forEach(function(child){ul.appendChild(build(child));});
    li.appendChild(ul);
    li.classList.add("collapsed");
    label.addEventListener("click",function(){li.classList.toggle("collapsed");});
  }else{
    li.classList.add("leaf");
  }
  return li;
}

roots.forEach(function(root){
  var li=build(root);
  li.classList.remove("collapsed");
  container.appendChild(li);
});

function setAll(collapsed){
  var items=container.querySelectorAll("li:not(.leaf)");
  for(var i=0;i<items.length;i++){
    items[i].classList.toggle("collapsed",collapsed);
  }
}
document.getElementById("expand-all").addEventListener("click",function(){setAll(false);});
document.getElementById("collapse-all").addEventListener("click",function(){setAll(true);});

/* Show matching items together with their ancestors */
document.getElementById("search").addEventListener("input",function(e){
  var q=e.target.value.trim().toLowerCase();
  var items=container.querySelectorAll("li");
  for(var i=0;i<items.length;i++){
    items[i].classList.toggle("hidden",q!=="");
  }
  if(q===""){return;}
  for(var j=0;j<items.length;j++){
    if(items[j].getAttribute("data-text").indexOf(q)===-1)continue;
    var el=items[j];
    while(el&&el!==container){
      if(el.tagName==="LI"){
        el.classList.remove("hidden");
        if(el!==items[j])el.classList.remove("collapsed");
      }
      el=el.parentNode;
    }
  }
});
})();
"""

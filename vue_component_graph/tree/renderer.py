"""ASCII tree and HTML rendering for component dependency graphs."""

from __future__ import annotations

import html
from pathlib import Path
from typing import Iterable

from ..models import DependencyGraph

_STYLE = """
    body {
      background: #0d1117;
      color: #c9d1d9;
      margin: 0;
      font-family: 'Segoe UI', Tahoma, Geneva, Verdana, sans-serif;
    }
    .tree-container {
      padding: 16px;
    }
    .tree-root,
    .tree-root ul {
      list-style: none;
      margin: 0;
      padding: 0;
      position: relative;
      padding-left: 2.5em;
    }
    .tree-root ul::before {
      content: '';
      position: absolute;
      top: 0;
      left: 1.25em;
      border-left: 2px solid #30363d;
      height: 100%;
    }
    .tree-root li {
      margin: 1em 0;
      position: relative;
    }
    .tree-root li::before {
      content: '';
      position: absolute;
      top: 0.9em;
      left: -1.25em;
      border-top: 2px solid #30363d;
      width: 1.25em;
    }
    .tree-root li .node {
      display: inline-flex;
      align-items: center;
      padding: 0.6em 1.2em;
      border: 1px solid #444c56;
      border-radius: 6px;
      background: #161b22;
      color: #adbac7;
      transition: background 0.2s;
    }
    .tree-root li .node.parent {
      cursor: pointer;
    }
    .tree-root li .node.parent:hover {
      background: #21262d;
    }
    .tree-root li .toggle {
      display: inline-block;
      width: 1em;
      margin-right: 0.5em;
      text-align: center;
      font-size: 0.8em;
    }
    .tree-root li .hide-btn {
      margin-left: 0.5em;
      padding: 0 0.4em;
      background: #f85149;
      border: none;
      border-radius: 3px;
      color: white;
      cursor: pointer;
      visibility: hidden;
    }
    .tree-root li .node:hover .hide-btn {
      visibility: visible;
    }
    .tree-root li .label {
      white-space: nowrap;
    }
    .tree-root ul > li .node { background: #1f242a; border-color: #3e444c; }
    .tree-root ul ul > li .node { background: #292e35; border-color: #494f58; }
    .tree-root ul ul ul > li .node { background: #323741; border-color: #565c66; }
    .tree-root ul ul ul ul > li .node { background: #3c424b; border-color: #616670; }
"""

# Shift+click cascades a collapse/expand to every descendant list.
# The hide button hides every node sharing the clicked label.
_SCRIPT = """
    var EXPANDED = '-';
    var COLLAPSED = '+';
    document.querySelectorAll('.tree-root .node.parent').forEach(function(node) {
      var toggle = node.querySelector('.toggle');
      var childList = node.nextElementSibling;
      if (!toggle || !childList) return;
      toggle.textContent = EXPANDED;
      childList.style.display = 'block';
      node.addEventListener('click', function(e) {
        var expand = childList.style.display === 'none';
        var display = expand ? 'block' : 'none';
        var glyph = expand ? EXPANDED : COLLAPSED;
        childList.style.display = display;
        toggle.textContent = glyph;
        if (!e.shiftKey) return;
        childList.querySelectorAll('ul').forEach(function(ul) {
          ul.style.display = display;
          var owner = ul.previousElementSibling;
          if (owner && owner.classList.contains('node')) {
            var ownerToggle = owner.querySelector('.toggle');
            if (ownerToggle) ownerToggle.textContent = glyph;
          }
        });
      });
    });
    document.querySelectorAll('.hide-btn').forEach(function(btn) {
      btn.addEventListener('click', function(e) {
        e.stopPropagation();
        var label = btn.parentElement.querySelector('.label');
        if (!label) return;
        var name = label.textContent;
        document.querySelectorAll('.label').forEach(function(other) {
          if (other.textContent !== name) return;
          var item = other.closest('li');
          if (item) item.style.display = 'none';
        });
      });
    });
"""


def render_ascii(root: Path, graph: DependencyGraph) -> str:
    """Render the dependency tree below root as a box-drawing string."""
    lines = [root.name]
    # (node, prefix, is_last), popped in display order
    stack = _child_entries(graph.dependencies_of(root), "")
    while stack:
        node, prefix, is_last = stack.pop()
        connector = "└── " if is_last else "├── "
        lines.append(prefix + connector + node.name)
        extension = "    " if is_last else "│   "
        stack.extend(_child_entries(graph.dependencies_of(node), prefix + extension))
    return "\n".join(lines)


def _child_entries(children: list[Path], prefix: str) -> list[tuple[Path, str, bool]]:
    """Stack entries for children, reversed so the first child pops first."""
    last = len(children) - 1
    return [(child, prefix, i == last) for i, child in reversed(list(enumerate(children)))]


def render_html(
    roots: Iterable[Path], graph: DependencyGraph, title: str = "Component Tree"
) -> str:
    """Render one collapsible tree per root as a self-contained HTML page."""
    lists = "\n".join(
        f'    <ul class="tree-root">{_render_node(root, graph)}</ul>'
        for root in roots
    )
    return f"""<!DOCTYPE html>
<html lang="en">
<head>
  <meta charset="UTF-8">
  <meta name="viewport" content="width=device-width, initial-scale=1.0">
  <title>{html.escape(title)}</title>
  <style>{_STYLE}  </style>
</head>
<body>
  <div class="tree-container">
{lists}
  </div>
  <script>{_SCRIPT}  </script>
</body>
</html>"""


def _render_node(root: Path, graph: DependencyGraph) -> str:
    """Render a node and its descendants as a nested list item."""
    parts: list[str] = []
    stack = [iter([root])]
    while stack:
        node = next(stack[-1], None)
        if node is None:
            stack.pop()
            if stack:
                parts.append("</ul></li>")
            continue

        children = graph.dependencies_of(node)
        parts.append(_node_header(node, bool(children)))
        if children:
            parts.append("<ul>")
            stack.append(iter(children))
        else:
            parts.append("</li>")
    return "".join(parts)


def _node_header(node: Path, has_children: bool) -> str:
    """Opening list item and node controls for a single node."""
    label = html.escape(node.name)
    node_class = "node parent" if has_children else "node"
    return (
        "<li>"
        f'<div class="{node_class}">'
        '<span class="toggle"></span>'
        f'<span class="label">{label}</span>'
        f'<button class="hide-btn" title="Hide all &#x27;{label}&#x27;">×</button>'
        "</div>"
    )

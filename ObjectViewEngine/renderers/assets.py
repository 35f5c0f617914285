"""Static style and script text shared by every rendered document.

Icons are inline SVG data URIs: the fragment must stay viewable without any
server, so nothing here may reference an external asset."""

from __future__ import annotations

import json
from typing import Iterable

ICON_COLLAPSED = (
    "data:image/svg+xml;charset=utf-8,"
    "%3Csvg xmlns='http://www.w3.org/2000/svg' viewBox='0 0 16 16'%3E"
    "%3Crect x='1.5' y='1.5' width='13' height='13' rx='2' fill='none' stroke='%23555'/%3E"
    "%3Cpath d='M4 8h8M8 4v8' stroke='%23555' stroke-width='1.6'/%3E%3C/svg%3E"
)
ICON_EXPANDED = (
    "data:image/svg+xml;charset=utf-8,"
    "%3Csvg xmlns='http://www.w3.org/2000/svg' viewBox='0 0 16 16'%3E"
    "%3Crect x='1.5' y='1.5' width='13' height='13' rx='2' fill='none' stroke='%23555'/%3E"
    "%3Cpath d='M4 8h8' stroke='%23555' stroke-width='1.6'/%3E%3C/svg%3E"
)

HIDDEN_STYLE = "display:none"

CSS = """
.ov-document { font-family: -apple-system, "Segoe UI", Helvetica, Arial, sans-serif; font-size: 13px; color: #222; }
.ov-box { border: 1px solid #d0d7de; border-radius: 4px; margin: 4px 0; background: #fff; }
.ov-header { display: flex; align-items: center; gap: 6px; padding: 4px 8px; background: #f6f8fa; }
.ov-title { font-weight: 600; }
.ov-header small { color: #57606a; }
.ov-icon { width: 14px; height: 14px; cursor: pointer; vertical-align: middle; }
.ov-body { padding: 4px 8px 4px 16px; }
.ov-indent { margin-left: 16px; }
.ov-table { border-collapse: collapse; width: 100%; }
.ov-table th, .ov-table td { border: 1px solid #e1e4e8; padding: 2px 6px; text-align: left; vertical-align: top; }
.ov-table th { background: #fafbfc; font-weight: 600; }
.ov-key { font-family: ui-monospace, Menlo, Consolas, monospace; white-space: nowrap; }
.ov-leaf { font-family: ui-monospace, Menlo, Consolas, monospace; white-space: pre-wrap; word-break: break-word; }
.ov-type { white-space: nowrap; color: #57606a; }
.ov-truncated { color: #8250df; font-style: italic; }
.ov-unreadable { color: #cf222e; font-style: italic; }
"""

_SCRIPT_TEMPLATE = """
(function () {
  var ICON_COLLAPSED = %(collapsed)s;
  var ICON_EXPANDED = %(expanded)s;
  function ovIcons(id) {
    return document.querySelectorAll('img[data-ov-target="' + id + '"]');
  }
  function ovToggle(id) {
    var body = document.getElementById(id);
    if (!body) { return; }
    var opening = body.style.display === "none";
    body.style.display = opening ? "" : "none";
    ovIcons(id).forEach(function (icon) { icon.src = opening ? ICON_EXPANDED : ICON_COLLAPSED; });
  }
  function ovWire(id) {
    ovIcons(id).forEach(function (icon) {
      icon.src = ICON_COLLAPSED;
      icon.addEventListener("click", function () { ovToggle(id); });
    });
  }
  function ovInit() {
%(glue)s
  }
  if (document.readyState === "loading") {
    document.addEventListener("DOMContentLoaded", ovInit);
  } else {
    ovInit();
  }
})();
"""


def glue_snippet(identifier: str) -> str:
    """JS statement wiring the icons and the toggle of one section."""
    return f"ovWire({json.dumps(identifier)});"


def build_script(snippets: Iterable[str]) -> str:
    """Shared script body: helpers defined once, every snippet run by a single initializer."""
    glue = "\n".join(f"    {snippet}" for snippet in snippets)
    return _SCRIPT_TEMPLATE % {
        "collapsed": json.dumps(ICON_COLLAPSED),
        "expanded": json.dumps(ICON_EXPANDED),
        "glue": glue,
    }


__all__ = ["CSS", "HIDDEN_STYLE", "ICON_COLLAPSED", "ICON_EXPANDED", "build_script", "glue_snippet"]

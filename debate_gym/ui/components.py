"""Static HTML fragments for server-rendered pages.

No route in this service serves them; the API returns JSON only. They are
the markup of the web client's CyberSeparator and VoidEmptyState, for
callers that render the void landing page from Python. Both renderers are
pure: no data access and no state.
"""

from __future__ import annotations

from html import escape

_SEPARATOR_CLASSES = (
    "relative w-full h-16 flex items-center justify-center overflow-hidden "
    "pointer-events-none z-20"
)

_SEPARATOR_TEMPLATE = """<div class="{classes}">
  <div class="absolute top-1/2 left-1/2 w-[40%] h-[1px] bg-gradient-to-r from-transparent via-cyan-500/80 to-transparent -translate-x-1/2 -translate-y-1/2 shadow-[0_0_30px_rgba(6,182,212,0.5)]"></div>
  <div class="absolute top-1/2 left-0 w-20 h-[2px] bg-cyan-400 blur-sm animate-[shimmer_3s_infinite_linear] shadow-[0_0_10px_rgba(6,182,212,0.8)]"></div>
  <div class="absolute inset-x-0 h-[1px] bg-white/5"></div>
  <div class="absolute top-1/2 left-[20%] w-2 h-2 bg-black border border-white/20 rotate-45 -translate-y-1/2"></div>
  <div class="absolute top-1/2 right-[20%] w-2 h-2 bg-black border border-white/20 rotate-45 -translate-y-1/2"></div>
</div>"""

VOID_EMPTY_TITLE = "No Phantoms Active"
VOID_EMPTY_BODY = "Be the first to enter The Void. Your anonymous thoughts await."

_VOID_EMPTY_TEMPLATE = """<div class="flex flex-col items-center justify-center py-16 px-4 text-center">
  <span class="ghost-icon h-16 w-16 text-zinc-600 mb-4 animate-pulse" aria-hidden="true"></span>
  <h3 class="text-xl font-bold text-zinc-400 mb-2">{title}</h3>
  <p class="text-sm text-zinc-500 max-w-md">{body}</p>
</div>"""


def cyber_separator(class_name: str | None = None) -> str:
    """Decorative glowing separator. ``class_name`` is appended to the root classes."""
    classes = _SEPARATOR_CLASSES
    if class_name:
        classes = f"{classes} {class_name}"
    return _SEPARATOR_TEMPLATE.format(classes=escape(classes, quote=True))


def void_empty_state() -> str:
    """Placeholder shown when nobody is in the void."""
    return _VOID_EMPTY_TEMPLATE.format(title=escape(VOID_EMPTY_TITLE), body=escape(VOID_EMPTY_BODY))

"""
ssr_first.api

HTTP layer for the ssr-first gateway.

Responsibilities:
- FastAPI app factory, middleware adapters and router modules.
- API-layer dependency wiring and the page context view model.
"""

# Package marker.


# --- Module Notes -----------------------------------------------------------
# The API layer stays thin: gate and locale decisions are made by `auth.gate`
# and `i18n.resolver`; this package only moves cookies and headers around them.

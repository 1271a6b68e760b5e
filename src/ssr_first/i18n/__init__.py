"""
ssr_first.i18n

Locale resolution package.

Responsibilities:
- Supported locale set and default.
- `Accept-Language` parsing and negotiation.
- UI string catalogue consumed by the page renderer.
"""

# Package marker.


# --- Module Notes -----------------------------------------------------------
# Nothing in this package touches HTTP objects; `api.middleware` adapts it.

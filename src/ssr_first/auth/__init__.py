"""
ssr_first.auth

Authentication package.

Responsibilities:
- Session token helpers and validation.
- The authentication gate and its `orig_url` redirect contract.
- The credential store seam used by the login route.
"""

# Package marker.

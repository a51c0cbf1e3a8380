"""
Admin panel for users and roles.

- permissions: closed permission vocabulary and user statuses
- seed: mock users and roles loaded at startup
- state: in-memory stores held on the application
- forms: add/edit dialog sessions over drafts
- router: HTTP endpoints for the admin page
"""

__all__: list[str] = []

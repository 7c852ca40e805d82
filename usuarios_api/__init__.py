"""Usuarios API: CRUD over the ``usuarios`` table exposed as JSON over HTTP."""

"""
tasklist: a single-page task list with add/edit/delete, sorting and status filters.

Subpackages:
- tasks/: models, store, validation, view projection, dialog, initial loader
- core/: ports, errors, AppState
- cli/: composition root, slash commands, console entrypoint
- connectors/: console rendering surface
"""

"""
Task subsystem.

Components:
- task_models.py: data structures (Task, TaskStatus, TaskFields)
- task_validation.py: form field validation for the write path
- task_store.py: in-memory store (create/update/delete/get/all/load_all)
- task_view.py: sort/filter/page projection for display
- task_dialog.py: add/edit dialog state machine + delete confirmation
- task_loader.py: one-time initial load from the remote source
- task_api.py: small high-level helpers used by the commands
"""

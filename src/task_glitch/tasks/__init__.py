"""
Task subsystem.

Components:
- task_models.py: data structures (Task, TaskDraft, TaskSummary, Priority, Status)
- metrics.py: ROI, performance grade and list summary
- sorting.py: stable priority/recency sort and search/priority filter
- task_form.py: `key=value` form parsing for the console commands
- task_store.py: JSON slot persistence (async load, full-list save)
- seed.py: initial data used when nothing has been saved
"""

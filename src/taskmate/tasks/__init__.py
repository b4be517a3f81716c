"""
Task subsystem.

Components:
- task_models.py: task variants (ToDo, Deadline, Event)
- task_list.py: ordered in-memory collection with index/mark/delete/find
- task_store.py: line-per-task text file storage
"""

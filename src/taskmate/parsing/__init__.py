"""
Line parsing.

Components:
- commands.py: the Command keyword vocabulary
- tokenizer.py: token splitting, shape checks, separators and thresholds
- task_parser.py: builds tasks (and their dates/times) from creation lines
- errors.py: the TaskmateError hierarchy
"""

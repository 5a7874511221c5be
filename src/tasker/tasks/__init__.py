"""
Task subsystem.

Components:
- task_models.py: Task, typed predicates (All/ByCompleted/ByText), update intents
- errors.py: ErrorKind and the exception hierarchy
- task_store.py: MongoDB connection bootstrap + query/update translation
- task_repository.py: create/filter/complete/delete with the domain rules
"""

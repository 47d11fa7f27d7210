"""
Task subsystem.

Components:
- task_models.py: data structures (TaskRecord, TaskState, lifecycle variants)
- lifecycle.py: classification, lifecycle parsing, capability groups and filtering
- accounting.py: status and active-time computation, totals
- transitions.py: start / suspend / resume / stop
- task_api.py: small high-level helpers used by the command layer
"""

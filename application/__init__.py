"""
Application Layer for the workout log.

This package contains:
- ports/: Abstract interfaces for stores and collaborators (what the view needs)
- use_cases/: The workouts page state machine
- exceptions.py: Errors shared with the infrastructure layer
"""

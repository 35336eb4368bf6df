"""FastAPI Mini Jira Application.

A small issue tracker backend with:
- Projects identified by a unique key
- Issues moving through OPEN -> IN_PROGRESS -> DONE
- A thread-safe in-memory store living for the process lifetime
"""

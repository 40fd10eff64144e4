"""
Service layer abstraction.

Each service encapsulates the logic of one endpoint family: the time
snapshot, the calculator and the in-memory user directory.  The
services know nothing about HTTP, so the API handlers stay thin.
"""

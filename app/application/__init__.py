"""
Application layer package.

Contains use cases that orchestrate validation chains and domain ports.
Each use case is a single class with one public ``execute`` coroutine.
This layer depends on domain ports, never on infrastructure.
"""

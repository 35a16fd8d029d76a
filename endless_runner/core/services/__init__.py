"""
Core services: configuration loading, input tracking and display management.

Modules are imported directly (e.g. endless_runner.core.services.input_manager)
so loading config never pulls in pygame.
"""

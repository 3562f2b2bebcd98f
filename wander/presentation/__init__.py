"""
Presentation Layer Package

HTTP controllers for the API and the Typer command line for the observers.
"""

"""Command line presentation: readiness waiting and the health dashboard."""
